from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, model_validator


class ListingEntry(BaseModel):
    name: str
    link: str

    model_config = ConfigDict(extra="forbid")


class ProblemRecord(BaseModel):
    name: str
    link: str | None = None
    is_local: bool = False
    is_online: bool = False

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="after")
    def _check_provenance(self) -> "ProblemRecord":
        if self.is_online and self.link is None:
            raise ValueError(f"online problem {self.name!r} has no link")
        if not (self.is_local or self.is_online):
            raise ValueError(f"problem {self.name!r} is neither local nor online")
        return self

    @classmethod
    def online(cls, name: str, link: str) -> "ProblemRecord":
        return cls(name=name, link=link, is_online=True)

    @classmethod
    def local(cls, name: str) -> "ProblemRecord":
        return cls(name=name, is_local=True)


class SyncReport(BaseModel):
    local_only: list[ProblemRecord] = Field(default_factory=list)
    online_only: list[ProblemRecord] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class SyncConfig(BaseModel):
    token: str
    host: str = "open"
    problems_dir: Path
    output_file: Path | None = None
    input_file: Path | None = None
    print_online: bool = False
    timeout_seconds: PositiveFloat | None = None

    model_config = ConfigDict(extra="forbid")

    @property
    def cookie_domain(self) -> str:
        return f"{self.host}.kattis.com"

    @property
    def base_url(self) -> str:
        return f"https://{self.cookie_domain}"
