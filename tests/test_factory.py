from dataclasses import dataclass, field

import pytest

from bmpfilters.bmp import Image, Pixel
from bmpfilters.cli_args import FilterDescriptor
from bmpfilters.factory import FilterCreatorFactory, FilterPipeline
from bmpfilters.filters import (
    CropFilter,
    EdgeFilter,
    EmptyImageError,
    Filter,
    GrayscaleFilter,
    NegativeFilter,
    SharpFilter,
)
from bmpfilters.makers import (
    make_crop_filter,
    make_edge_filter,
    make_grayscale_filter,
    make_negative_filter,
    make_sharp_filter,
)


@dataclass
class _Recorder(Filter):
    label: str
    log: list = field(default_factory=list)

    def apply(self, image):
        self.log.append(self.label)


def _factory():
    factory = FilterCreatorFactory()
    factory.register("-crop", make_crop_filter)
    factory.register("-gs", make_grayscale_filter)
    factory.register("-neg", make_negative_filter)
    factory.register("-edge", make_edge_filter)
    factory.register("-sharp", make_sharp_filter)
    return factory


def _sample_image():
    pixels = [
        Pixel(10, 20, 30),
        Pixel(200, 100, 50),
        Pixel(0, 0, 0),
        Pixel(255, 255, 255),
        Pixel(90, 180, 40),
        Pixel(5, 60, 120),
        Pixel(30, 30, 30),
        Pixel(70, 140, 210),
        Pixel(250, 10, 90),
    ]
    return Image.from_pixels(3, 3, pixels)


@pytest.mark.parametrize(
    "descriptor, reference",
    [
        (FilterDescriptor("-gs", []), GrayscaleFilter()),
        (FilterDescriptor("-crop", ["1", "1"]), CropFilter(1, 1)),
        (FilterDescriptor("-neg", []), NegativeFilter()),
        (FilterDescriptor("-edge", ["51"]), EdgeFilter(51.0)),
        (FilterDescriptor("-sharp", []), SharpFilter()),
    ],
)
def test_filter_mapping(descriptor, reference):
    created = _factory().create_filter(descriptor)
    assert type(created) is type(reference)

    produced = _sample_image()
    created.apply(produced)
    expected = _sample_image()
    reference.apply(expected)
    assert (produced.width, produced.height) == (expected.width, expected.height)
    assert produced.pixels == expected.pixels


def test_created_filters_carry_parameters():
    factory = _factory()
    assert factory.create_filter(FilterDescriptor("-crop", ["1", "1"])) == CropFilter(1, 1)
    assert factory.create_filter(FilterDescriptor("-edge", ["51"])) == EdgeFilter(51.0)


def test_unknown_name_gives_none():
    assert _factory().create_filter(FilterDescriptor("-blur", ["3"])) is None


def test_first_registration_wins():
    first = NegativeFilter()
    second = SharpFilter()
    factory = FilterCreatorFactory()
    factory.register("-x", lambda d: first)
    factory.register("-x", lambda d: second)
    assert factory.create_filter(FilterDescriptor("-x")) is first


def test_register_rejects_non_callable():
    with pytest.raises(TypeError):
        FilterCreatorFactory().register("-neg", None)


def test_create_pipeline_skips_unknown():
    pipeline = _factory().create_pipeline(
        [FilterDescriptor("-neg"), FilterDescriptor("-unknown"), FilterDescriptor("-gs")]
    )
    assert len(pipeline) == 2
    assert [type(f) for f in pipeline] == [NegativeFilter, GrayscaleFilter]


def test_pipeline_add_returns_filter_and_counts():
    pipeline = FilterPipeline()
    neg = NegativeFilter()
    assert pipeline.add(neg) is neg
    assert len(pipeline) == 1


def test_pipeline_add_rejects_none():
    with pytest.raises(TypeError):
        FilterPipeline().add(None)


def test_pipeline_applies_in_order():
    log = []
    pipeline = FilterPipeline([_Recorder("a", log), _Recorder("b", log), _Recorder("c", log)])
    pipeline.apply(Image.from_pixels(1, 1, [Pixel(0, 0, 0)]))
    assert log == ["a", "b", "c"]


def test_pipeline_crop_then_negate():
    image = Image.from_pixels(2, 1, [Pixel(10, 20, 30), Pixel(1, 2, 3)])
    pipeline = _factory().create_pipeline(
        [FilterDescriptor("-crop", ["1", "1"]), FilterDescriptor("-neg")]
    )
    pipeline.apply(image)
    assert (image.width, image.height) == (1, 1)
    assert image.pixels == [Pixel(245, 235, 225)]


def test_pipeline_on_empty_image_raises():
    pipeline = FilterPipeline([NegativeFilter()])
    with pytest.raises(EmptyImageError):
        pipeline.apply(Image())