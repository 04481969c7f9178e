################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""
Tests for powervs.utils.regions.
"""
import pytest

from powervs.utils import exceptions, regions


class TestGetRegion:
    @staticmethod
    @pytest.mark.parametrize(
        "zone,expected_region",
        [
            ("lon06", "lon"),
            ("us-south", "us-south"),
            ("dal12", "dal"),
            ("sao01", "sao"),
            ("sao04", "sao"),
            ("us-east", "us-east"),
            ("wdc06", "wdc"),
            ("wdc07", "wdc"),
            ("tor01", "tor"),
            ("eu-de-1", "eu-de"),
            ("syd01", "syd"),
            ("tok04", "tok"),
            ("mon01", "mon"),
            ("osa21", "osa"),
            ("mad02", "mad"),
            ("mad04", "mad"),
        ],
    )
    def test_known_zones(zone, expected_region):
        assert regions.get_region(zone) == expected_region

    @staticmethod
    def test_unknown_zone():
        with pytest.raises(exceptions.NotFoundError) as exc_info:
            regions.get_region("blr01")

        assert exc_info.value.entity == "region"
        assert exc_info.value.key == "blr01"


class TestRegionPairing:
    @staticmethod
    def test_cos_region_for_vpc_region():
        assert regions.cos_region_for_vpc_region("us-south") == "us-south"

    @staticmethod
    def test_cos_region_for_unknown_vpc_region():
        with pytest.raises(exceptions.NotFoundError):
            regions.cos_region_for_vpc_region("eu-de1")

    @staticmethod
    def test_vpc_region_for_powervs_region():
        assert regions.vpc_region_for_powervs_region("dal") == "us-south"

    @staticmethod
    def test_vpc_region_for_unknown_powervs_region():
        with pytest.raises(exceptions.NotFoundError):
            regions.vpc_region_for_powervs_region("eu-de1")

    @staticmethod
    def test_cos_region_for_powervs_region():
        assert regions.cos_region_for_powervs_region("dal") == "us-south"

    @staticmethod
    def test_cos_region_differs_from_vpc_region_in_madrid():
        assert regions.vpc_region_for_powervs_region("mad") == "eu-es"
        assert regions.cos_region_for_powervs_region("mad") == "eu-de"

    @staticmethod
    def test_cos_region_for_unknown_powervs_region():
        with pytest.raises(exceptions.NotFoundError):
            regions.cos_region_for_powervs_region("eu-de1")


class TestValidation:
    @staticmethod
    @pytest.mark.parametrize("region,known", [("che", False), ("us-south", True)])
    def test_validate_cos_region(region, known):
        assert regions.validate_cos_region(region) is known

    @staticmethod
    @pytest.mark.parametrize("region,known", [("che", False), ("us-south", True)])
    def test_validate_vpc_region(region, known):
        assert regions.validate_vpc_region(region) is known

    @staticmethod
    @pytest.mark.parametrize("zone,known", [("sao04", True), ("wdc04", False)])
    def test_validate_zone(zone, known):
        assert regions.validate_zone(zone) is known


class TestListings:
    @staticmethod
    def test_region_short_names():
        assert set(regions.region_short_names()) == {
            "dal",
            "eu-de",
            "lon",
            "mad",
            "mon",
            "osa",
            "syd",
            "sao",
            "tok",
            "us-east",
            "wdc",
        }

    @staticmethod
    def test_zone_names():
        zones = regions.zone_names()

        assert "dal10" in zones
        assert "wdc07" in zones
        assert len(zones) == len(set(zones))

    @staticmethod
    @pytest.mark.parametrize(
        "zone,expected_region",
        [("sao04", "sao"), ("eu-de-2", "eu-de"), ("wdc04", "")],
    )
    def test_region_from_zone(zone, expected_region):
        assert regions.region_from_zone(zone) == expected_region


class TestSysTypes:
    @staticmethod
    @pytest.mark.parametrize(
        "region,expected",
        [
            ("dal", ["s922", "e980"]),
            ("mad", ["s1022"]),
            ("us-east", []),
        ],
    )
    def test_available_sys_types(region, expected):
        assert regions.available_sys_types(region) == expected

    @staticmethod
    def test_available_sys_types_unknown_region():
        with pytest.raises(exceptions.NotFoundError) as exc_info:
            regions.available_sys_types("blr")

        assert str(exc_info.value) == "unknown region name provided"

    @staticmethod
    def test_all_known_sys_types():
        assert regions.all_known_sys_types() == {"s922", "e980", "s1022"}


class TestTransitGateway:
    @staticmethod
    @pytest.mark.parametrize(
        "powervs_region,vpc_region,required",
        [
            # Paired regions
            ("wdc", "us-east", False),
            # Different regions
            ("mon", "jp-osa", True),
            # Unknown PowerVS region
            ("blr", "us-east", True),
        ],
    )
    def test_is_global_routing_required(powervs_region, vpc_region, required):
        assert (
            regions.is_global_routing_required_for_tg(powervs_region, vpc_region)
            is required
        )


class TestVPCZones:
    @staticmethod
    def test_known_region():
        assert regions.vpc_zones_for_vpc_region("jp-osa") == [
            "jp-osa-1",
            "jp-osa-2",
            "jp-osa-3",
        ]

    @staticmethod
    def test_unknown_region():
        with pytest.raises(exceptions.NotFoundError) as exc_info:
            regions.vpc_zones_for_vpc_region("unknown")

        assert (
            str(exc_info.value)
            == "VPC zones corresponding to the VPC region unknown is not found"
        )

    @staticmethod
    def test_every_paired_vpc_region_has_zones():
        for region in regions.REGIONS.values():
            assert regions.vpc_zones_for_vpc_region(region.vpc_region)


class TestTableIsReadOnly:
    @staticmethod
    def test_regions_mapping_cant_be_mutated():
        with pytest.raises(TypeError):
            regions.REGIONS["new"] = regions.REGIONS["dal"]  # type: ignore[index]
