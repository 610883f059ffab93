import logging
from dataclasses import dataclass, field

from .config import DEFAULT_INDEX_CONFIG, IndexConfig
from .params import GroupParameters
from .utils import rand

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrivateShare:
    index: int
    """x-coordinate of the share."""
    secret: int = field(repr=False)
    """Secret exponent in ``[0, q)``; never leaves its holder."""


@dataclass(frozen=True)
class PublicShare:
    index: int
    """x-coordinate of the share."""
    value: int
    """Group element ``g^secret mod p``."""


@dataclass(frozen=True)
class KeyShare:
    private: PrivateShare
    public: PublicShare

    def __post_init__(self):
        if self.private.index != self.public.index:
            raise ValueError(
                f"Private index {self.private.index} does not match public index {self.public.index}."
            )

    @property
    def index(self) -> int:
        return self.public.index


def issue_share(params: GroupParameters, index: int, config: IndexConfig = DEFAULT_INDEX_CONFIG) -> KeyShare:
    config.check_user_index(index)
    y = rand(params.q)
    Y = pow(params.g, y, params.p)
    logger.debug("Issued key share for participant %d", index)
    return KeyShare(PrivateShare(index, y), PublicShare(index, Y))


def issue_shares(params: GroupParameters, count: int, config: IndexConfig = DEFAULT_INDEX_CONFIG) -> list[KeyShare]:
    """Issue ``count`` shares at consecutive indices from ``config.user_index``."""
    return [issue_share(params, config.user_index + i, config) for i in range(count)]
