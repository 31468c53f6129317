"""The command-line application that filters a BMP image."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .bmp import Image
from .cli_args import InvalidFilterParameterError, NotEnoughArgsError, parse_args
from .factory import FilterCreatorFactory
from .makers import (
    make_crop_filter,
    make_edge_filter,
    make_grayscale_filter,
    make_negative_filter,
    make_sharp_filter,
)


class Application:
    """Reads an image, runs the requested filters over it and saves the result."""

    def __init__(self) -> None:
        self.factory = FilterCreatorFactory()
        self.factory.register("-crop", make_crop_filter)
        self.factory.register("-gs", make_grayscale_filter)
        self.factory.register("-neg", make_negative_filter)
        self.factory.register("-sharp", make_sharp_filter)
        self.factory.register("-edge", make_edge_filter)

    def run(self, argv: Sequence[str]) -> None:
        """Process the arguments that follow the program name."""
        args = parse_args(argv)
        image = Image.read(args.input_path)
        pipeline = self.factory.create_pipeline(args.filters)
        pipeline.apply(image)
        image.save(args.output_path)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the application and return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        Application().run(argv)
    except NotEnoughArgsError:
        print(
            "Error: You must provide at least 2 arguments: input and output file names",
            file=sys.stderr,
        )
        return 1
    except InvalidFilterParameterError:
        print("Error: Filter parameters must be real numbers or integers", file=sys.stderr)
        return 1
    except (ValueError, OSError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    except Exception as error:  # noqa: BLE001
        print(f"Something went wrong: {error}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())