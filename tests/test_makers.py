import pytest

from bmpfilters.cli_args import FilterDescriptor
from bmpfilters.filters import CropFilter, EdgeFilter, GrayscaleFilter, NegativeFilter, SharpFilter
from bmpfilters.makers import (
    DescriptorError,
    make_crop_filter,
    make_edge_filter,
    make_grayscale_filter,
    make_negative_filter,
    make_sharp_filter,
)


def test_crop_maker_reads_width_and_height():
    assert make_crop_filter(FilterDescriptor("-crop", ["1", "1"])) == CropFilter(1, 1)
    assert make_crop_filter(FilterDescriptor("-crop", ["30", "20"])) == CropFilter(30, 20)


def test_crop_maker_takes_integer_prefix():
    assert make_crop_filter(FilterDescriptor("-crop", ["7.9", "3"])) == CropFilter(7, 3)


def test_crop_maker_requires_two_params():
    with pytest.raises(DescriptorError):
        make_crop_filter(FilterDescriptor("-crop", ["1"]))


def test_crop_maker_rejects_non_integer():
    with pytest.raises(DescriptorError):
        make_crop_filter(FilterDescriptor("-crop", ["abc", "1"]))


def test_edge_maker_reads_threshold():
    assert make_edge_filter(FilterDescriptor("-edge", ["51"])) == EdgeFilter(51.0)
    assert make_edge_filter(FilterDescriptor("-edge", ["0.5"])) == EdgeFilter(0.5)


def test_edge_maker_requires_threshold():
    with pytest.raises(DescriptorError):
        make_edge_filter(FilterDescriptor("-edge", []))


@pytest.mark.parametrize(
    "maker, name, expected_type",
    [
        (make_grayscale_filter, "-gs", GrayscaleFilter),
        (make_negative_filter, "-neg", NegativeFilter),
        (make_sharp_filter, "-sharp", SharpFilter),
    ],
)
def test_parameterless_makers(maker, name, expected_type):
    assert type(maker(FilterDescriptor(name))) is expected_type


@pytest.mark.parametrize(
    "maker, params",
    [
        (make_crop_filter, ["1", "1"]),
        (make_grayscale_filter, []),
        (make_negative_filter, []),
        (make_sharp_filter, []),
        (make_edge_filter, ["51"]),
    ],
)
def test_makers_reject_wrong_name(maker, params):
    with pytest.raises(DescriptorError):
        maker(FilterDescriptor("-blur", params))