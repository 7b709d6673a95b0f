import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel

from dfree.config.settings import config
from dfree.mounts.aggregate import calc_total
from dfree.mounts.filters import DisplayFilter, filter_local, filter_mounts
from dfree.mounts.models import Mount
from dfree.mounts.parser import read_mounts
from dfree.mounts.resolver import resolve_paths, sort_mounts
from dfree.mounts.stats import enrich_mounts

logger = logging.getLogger(__name__)


class ListingOptions(BaseModel):
    mounts_file: str = config.mounts_file
    display_filter: DisplayFilter = DisplayFilter.MINIMAL
    inodes: bool = False
    paths: List[str] = []
    local_only: bool = False
    total: bool = False


class Listing(BaseModel):
    mounts: List[Mount]
    # (path, reason) for query paths that could not be resolved
    unresolved: List[Tuple[str, str]] = []


def get_mounts(options: ListingOptions) -> Listing:
    """
    Runs the mount pipeline: parse, filter, enrich, then either resolve the
    query paths or sort. A malformed mount table aborts the listing.
    """
    mounts = read_mounts(options.mounts_file)
    logger.debug(f"Parsed {len(mounts)} mounts")

    mounts = filter_mounts(mounts, options.display_filter)
    if options.local_only:
        mounts = filter_local(mounts)
    logger.debug(f"{len(mounts)} mounts left after filtering ({options.display_filter.value})")

    mounts = enrich_mounts(mounts, options.inodes)

    if options.paths:
        mounts, unresolved = resolve_paths(options.paths, mounts)
        return Listing(mounts=mounts, unresolved=unresolved)

    return Listing(mounts=sort_mounts(mounts))


def build_rows(options: ListingOptions) -> Listing:
    """get_mounts plus the total row when requested."""
    listing = get_mounts(options)
    if options.total:
        total = calc_total(listing.mounts)
        listing = listing.model_copy(update={"mounts": listing.mounts + [total]})
    return listing
