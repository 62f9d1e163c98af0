import re
from dataclasses import dataclass
from math import ceil

MAX_PAGE = 2**31 - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(raw: str | None) -> int | None:
    if raw is None or not _INTEGER.fullmatch(raw.strip()):
        return None
    try:
        return int(raw)
    except ValueError:
        # past the interpreter digit limit
        return None


@dataclass(frozen=True)
class PaginationConfig:
    skip_pagination_enabled: bool = True
    default_limit: int = 15
    max_limit: int = 100

    def __post_init__(self) -> None:
        if self.default_limit < 1 or self.max_limit < 1:
            raise ValueError("default_limit and max_limit must be >= 1")
        if self.default_limit > self.max_limit:
            raise ValueError("default_limit must not exceed max_limit")


@dataclass(frozen=True)
class PaginationRequest:
    requested_limit: int | None = None

    @classmethod
    def from_query(cls, raw: str | None) -> "PaginationRequest":
        return cls(requested_limit=_parse_int(raw))


def resolve(config: PaginationConfig, request: PaginationRequest) -> int:
    """Effective page size for a listing query.

    Request overrides are honoured only when ``skip_pagination_enabled`` is
    set. Missing, zero and negative values fall back to the default; larger
    values are capped at ``max_limit``.
    """
    if not config.skip_pagination_enabled:
        return config.default_limit

    requested = request.requested_limit
    if requested is None or requested <= 0:
        return config.default_limit
    return min(requested, config.max_limit)


def parse_page(raw: str | None) -> int:
    page = _parse_int(raw)
    if page is None or page < 1 or page > MAX_PAGE:
        return 1
    return page


@dataclass(frozen=True)
class Page:
    limit: int
    page: int = 1

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def meta(self, *, total: int, count: int) -> dict:
        return {
            "total": total,
            "count": count,
            "per_page": self.limit,
            "current_page": self.page,
            "total_pages": ceil(total / self.limit) if total else 0,
        }
