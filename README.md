# bmpfilters

A small command-line tool and library that reads an uncompressed 24-bit BMP
image, runs it through a chain of filters and writes the result to a new BMP
file.

## Installation

```
pip install .
```

## Command line

```
bmpfilters INPUT.bmp OUTPUT.bmp [-filter [param ...]] ...
```

Filters are applied from left to right. The available filters are:

| Filter               | Effect                                                                 |
|----------------------|------------------------------------------------------------------------|
| `-crop WIDTH HEIGHT` | Keep the top-left part of the image, at most `WIDTH` x `HEIGHT`        |
| `-gs`                | Convert to grayscale (0.299 R + 0.587 G + 0.114 B, truncated)          |
| `-neg`               | Invert every colour channel                                            |
| `-sharp`             | Sharpen with a cross-shaped kernel (centre 5, neighbours -1)           |
| `-edge THRESHOLD`    | Grayscale, apply a cross-shaped kernel (centre 4, neighbours -1), then make pixels above `THRESHOLD` white and the rest black |

Every argument after the two file names must either start with `-` (a filter
name) or be a number belonging to the filter before it. Parameters of `-crop`
are read as integers. Filter names that are not in the table above are
ignored. At image borders the kernels repeat the nearest edge pixel.

Example:

```
bmpfilters photo.bmp result.bmp -crop 800 600 -gs -sharp
```

On an error — missing file names, a non-numeric filter parameter, a file that
cannot be read as BMP, an empty image — the tool prints `Error: ...` to
standard error and exits with status 1. Any other failure prints
`Something went wrong: ...` and exits with status 2.

## Library use

```python
from bmpfilters.bmp import Image
from bmpfilters.filters import CropFilter, GrayscaleFilter, EdgeFilter
from bmpfilters.factory import FilterPipeline

image = Image.read("photo.bmp")

pipeline = FilterPipeline()
pipeline.add(CropFilter(100, 100))
pipeline.add(GrayscaleFilter())
pipeline.add(EdgeFilter(50))
pipeline.apply(image)

image.save("edges.bmp")
```

The modules:

- `bmpfilters.bmp` — `Image` (`read`, `save`, `from_pixels`, `pixel`,
  `set_pixel`, `resize`, `is_empty`), `Pixel`, the header dataclasses
  `BmpHeader`, `DibHeader`, `BmpHeaders`, and `BmpFormatError`.
- `bmpfilters.filters` — `Filter` and its subclasses `CropFilter`,
  `GrayscaleFilter`, `NegativeFilter`, `SharpFilter`, `EdgeFilter`. Each
  `apply` changes the image in place and raises `EmptyImageError` for an image
  with no pixels.
- `bmpfilters.cli_args` — `parse_args` turns the arguments after the program
  name into a `ParsedArgs` holding `FilterDescriptor`s; it raises
  `NotEnoughArgsError`, `InvalidFilterParameterError` or `ArgsError`.
- `bmpfilters.makers` — `make_crop_filter`, `make_grayscale_filter`,
  `make_negative_filter`, `make_sharp_filter`, `make_edge_filter` build filters
  from descriptors and raise `DescriptorError` on a mismatch.
- `bmpfilters.factory` — `FilterPipeline` and `FilterCreatorFactory`, which maps
  filter names to makers and builds pipelines from descriptors.
- `bmpfilters.app` — `Application` and `main`, the command entry point.

Running the whole command from Python:

```python
from bmpfilters.app import Application

Application().run(["in.bmp", "out.bmp", "-neg"])
```

## Limits

Only uncompressed 24-bit BMP files are handled. The headers are checked for
the `BM` signature only; palettes, other bit depths, compression and
top-down images are not supported. Saved files reuse the headers read from the
input, with the size fields updated after cropping.

## Running the tests

```
pip install .[test]
pytest
```