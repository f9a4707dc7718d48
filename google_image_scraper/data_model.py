from dataclasses import dataclass, field
from typing import Any, List, Optional

DEFAULT_OUTPUT_DIR = "./output"
DEFAULT_DELAY = 1.0


@dataclass
class ScrapeConfig:
    """Everything a single run needs, however the values were collected."""
    query: str
    limit: Any
    output_dir: str = DEFAULT_OUTPUT_DIR
    delay: float = DEFAULT_DELAY
    keep_partial: bool = False
    show_progress: bool = True
    debug: bool = False


@dataclass(frozen=True)
class AcquiredItem:
    """A downloaded image on disk."""
    path: str
    reference: str
    index: int


@dataclass(frozen=True)
class DownloadResult:
    ok: bool
    path: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def success(cls, path: str) -> "DownloadResult":
        return cls(ok=True, path=path)

    @classmethod
    def failure(cls, reason: str) -> "DownloadResult":
        return cls(ok=False, reason=reason)


@dataclass(frozen=True)
class RunOutcome:
    items: List[AcquiredItem] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def paths(self) -> List[str]:
        return [item.path for item in self.items]

    @property
    def succeeded(self) -> bool:
        return bool(self.items)

    def __len__(self):
        return len(self.items)
