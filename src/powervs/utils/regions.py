################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""
Static directory of PowerVS regions.

Maps every PowerVS region to the IBM Cloud VPC region and IBM COS region paired
with it, and lists the zones and system types available in it. The table is built
once at import time and is read-only afterwards.
"""

import typing as t
from dataclasses import dataclass
from types import MappingProxyType

from .exceptions import NotFoundError


@dataclass(frozen=True)
class Region:
    """IBM Cloud COS region, VPC region and zones associated with a PowerVS region."""

    description: str
    vpc_region: str
    cos_region: str
    zones: t.Tuple[str, ...]
    sys_types: t.Tuple[str, ...]


# Order matters: the first matching prefix wins.
_ZONE_PREFIXES: t.Tuple[t.Tuple[str, str], ...] = (
    ("us-south", "us-south"),
    ("dal", "dal"),
    ("sao", "sao"),
    ("us-east", "us-east"),
    ("tor", "tor"),
    ("eu-de-", "eu-de"),
    ("lon", "lon"),
    ("syd", "syd"),
    ("tok", "tok"),
    ("osa", "osa"),
    ("mon", "mon"),
    ("mad", "mad"),
    ("wdc", "wdc"),
)


REGIONS: t.Mapping[str, Region] = MappingProxyType(
    {
        "dal": Region(
            description="Dallas, USA",
            vpc_region="us-south",
            cos_region="us-south",
            zones=("dal10", "dal12"),
            sys_types=("s922", "e980"),
        ),
        "eu-de": Region(
            description="Frankfurt, Germany",
            vpc_region="eu-de",
            cos_region="eu-de",
            zones=("eu-de-1", "eu-de-2"),
            sys_types=("s922", "e980"),
        ),
        "lon": Region(
            description="London, UK.",
            vpc_region="eu-gb",
            cos_region="eu-gb",
            zones=("lon04", "lon06"),
            sys_types=("s922", "e980"),
        ),
        "mad": Region(
            description="Madrid, Spain",
            vpc_region="eu-es",
            # COS isn't offered in Madrid, Frankfurt is the closest.
            cos_region="eu-de",
            zones=("mad02", "mad04"),
            sys_types=("s1022",),
        ),
        "mon": Region(
            description="Montreal, Canada",
            vpc_region="ca-tor",
            cos_region="ca-tor",
            zones=("mon01",),
            sys_types=("s922", "e980"),
        ),
        "osa": Region(
            description="Osaka, Japan",
            vpc_region="jp-osa",
            cos_region="jp-osa",
            zones=("osa21",),
            sys_types=("s922", "e980"),
        ),
        "syd": Region(
            description="Sydney, Australia",
            vpc_region="au-syd",
            cos_region="au-syd",
            zones=("syd04", "syd05"),
            sys_types=("s922", "e980"),
        ),
        "sao": Region(
            description="São Paulo, Brazil",
            vpc_region="br-sao",
            cos_region="br-sao",
            zones=("sao01", "sao04"),
            sys_types=("s922", "e980"),
        ),
        "tok": Region(
            description="Tokyo, Japan",
            vpc_region="jp-tok",
            cos_region="jp-tok",
            zones=("tok04",),
            sys_types=("s922", "e980"),
        ),
        "us-east": Region(
            description="Washington DC, USA",
            vpc_region="us-east",
            cos_region="us-east",
            zones=("us-east",),
            # TODO: fill in once PowerVS publishes the system types for us-east.
            sys_types=(),
        ),
        "wdc": Region(
            description="Washington DC, USA",
            vpc_region="us-east",
            cos_region="us-east",
            zones=("wdc06", "wdc07"),
            sys_types=("s922", "e980"),
        ),
    }
)
"""Mapping between PowerVS regions and IBM Cloud VPC and IBM COS regions."""


VPC_ZONES: t.Mapping[str, t.Tuple[str, ...]] = MappingProxyType(
    {
        vpc_region: tuple(f"{vpc_region}-{n}" for n in range(1, 4))
        for vpc_region in (
            "au-syd",
            "br-sao",
            "ca-tor",
            "eu-de",
            "eu-es",
            "eu-gb",
            "jp-osa",
            "jp-tok",
            "us-east",
            "us-south",
        )
    }
)
"""Availability zones of every VPC region PowerVS regions are paired with."""


def get_region(zone: str) -> str:
    """Get the PowerVS region the zone belongs to, based on the zone name prefix.

    Raises:
        NotFoundError: when no known region matches the zone.
    """
    for prefix, region in _ZONE_PREFIXES:
        if zone.startswith(prefix):
            return region

    raise NotFoundError(
        f"region not found for the zone {zone}", entity="region", key=zone
    )


def cos_region_for_vpc_region(vpc_region: str) -> str:
    """Returns the COS region paired with the given VPC region.

    Raises:
        NotFoundError: when no PowerVS region is paired with the VPC region.
    """
    for region in REGIONS.values():
        if region.vpc_region == vpc_region:
            return region.cos_region

    raise NotFoundError(
        f"COS region corresponding to a VPC region {vpc_region} not found",
        entity="COS region",
        key=vpc_region,
    )


def vpc_region_for_powervs_region(region: str) -> str:
    """Returns the VPC region for the specified PowerVS region.

    Raises:
        NotFoundError: when the PowerVS region is unknown.
    """
    try:
        return REGIONS[region].vpc_region
    except KeyError:
        raise NotFoundError(
            f"VPC region corresponding to a PowerVS region {region} not found",
            entity="VPC region",
            key=region,
        )


def cos_region_for_powervs_region(region: str) -> str:
    """Returns the IBM COS region for the specified PowerVS region.

    Raises:
        NotFoundError: when the PowerVS region is unknown.
    """
    try:
        return REGIONS[region].cos_region
    except KeyError:
        raise NotFoundError(
            f"COS region corresponding to a PowerVS region {region} not found",
            entity="COS region",
            key=region,
        )


def validate_vpc_region(region: str) -> bool:
    return any(r.vpc_region == region for r in REGIONS.values())


def validate_cos_region(region: str) -> bool:
    return any(r.cos_region == region for r in REGIONS.values())


def region_short_names() -> t.List[str]:
    return list(REGIONS)


def validate_zone(zone: str) -> bool:
    """Checks that the zone is known and tested."""
    return zone in zone_names()


def zone_names() -> t.List[str]:
    return [zone for region in REGIONS.values() for zone in region.zones]


def region_from_zone(zone: str) -> str:
    """Returns the region name for a given zone name, or an empty string."""
    for name, region in REGIONS.items():
        if zone in region.zones:
            return name
    return ""


def available_sys_types(region: str) -> t.List[str]:
    """Returns the system types available in the PowerVS region.

    Raises:
        NotFoundError: when the PowerVS region is unknown.
    """
    try:
        known_region = REGIONS[region]
    except KeyError:
        raise NotFoundError(
            "unknown region name provided", entity="region", key=region
        )
    return list(known_region.sys_types)


def all_known_sys_types() -> t.Set[str]:
    return {sys_type for region in REGIONS.values() for sys_type in region.sys_types}


def is_global_routing_required_for_tg(powervs_region: str, vpc_region: str) -> bool:
    """Whether a Transit Gateway between the two regions needs global routing.

    Local routing is only enough when the VPC region is the one paired with the
    PowerVS region.
    """
    region = REGIONS.get(powervs_region)
    return region is None or region.vpc_region != vpc_region


def vpc_zones_for_vpc_region(vpc_region: str) -> t.List[str]:
    """Returns the availability zones of the VPC region.

    Raises:
        NotFoundError: when the VPC region is unknown.
    """
    try:
        return list(VPC_ZONES[vpc_region])
    except KeyError:
        raise NotFoundError(
            f"VPC zones corresponding to the VPC region {vpc_region} is not found",
            entity="VPC zones",
            key=vpc_region,
        )
