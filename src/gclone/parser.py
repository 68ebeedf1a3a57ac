from dataclasses import dataclass

GITHUB_URL = "https://github.com/"


@dataclass(frozen=True)
class Repo:
    full_name: str

    def __str__(self) -> str:
        return self.full_name

    @property
    def name(self) -> str:
        """Directory git creates for the clone: the last non-empty segment."""
        segments = [s for s in self.full_name.split("/") if s]
        return segments[-1] if segments else ""

    @property
    def url(self) -> str:
        return f"{GITHUB_URL}{self.full_name}"


def resolve_repo(repo_name: str, default_owner: str) -> Repo:
    """Turn `name` or `owner/name` into a Repo.

    A bare name belongs to `default_owner`. Anything containing a slash is
    taken verbatim.
    """

    if "/" not in repo_name:
        repo_name = f"{default_owner}/{repo_name}"

    return Repo(repo_name)
