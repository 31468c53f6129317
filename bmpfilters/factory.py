"""Filter pipelines and the factory that builds them from descriptors."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional

from .bmp import Image
from .cli_args import FilterDescriptor
from .filters import Filter

FilterCreator = Callable[[FilterDescriptor], Filter]


class FilterPipeline:
    """An ordered sequence of filters applied one after another."""

    def __init__(self, filters: Iterable[Filter] = ()) -> None:
        self._filters: list[Filter] = []
        for item in filters:
            self.add(item)

    def add(self, filter: Filter) -> Filter:
        """Append a filter to the end of the pipeline and return it."""
        if filter is None:
            raise TypeError("filter must not be None")
        self._filters.append(filter)
        return filter

    def apply(self, image: Image) -> None:
        """Apply every filter to the image in the order they were added."""
        for item in self._filters:
            item.apply(image)

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[Filter]:
        return iter(self._filters)


class FilterCreatorFactory:
    """Maps filter names to functions that build filters from descriptors."""

    def __init__(self) -> None:
        self._creators: dict[str, FilterCreator] = {}

    def register(self, name: str, creator: FilterCreator) -> None:
        """Register a creator under a name; an existing registration is kept."""
        if not callable(creator):
            raise TypeError("creator must be callable")
        self._creators.setdefault(name, creator)

    def create_filter(self, descriptor: FilterDescriptor) -> Optional[Filter]:
        """Build the filter a descriptor names, or return None if the name is unknown."""
        creator = self._creators.get(descriptor.name)
        if creator is None:
            return None
        return creator(descriptor)

    def create_pipeline(self, descriptors: Iterable[FilterDescriptor]) -> FilterPipeline:
        """Build a pipeline from descriptors, skipping those with unknown names."""
        pipeline = FilterPipeline()
        for descriptor in descriptors:
            built = self.create_filter(descriptor)
            if built is not None:
                pipeline.add(built)
        return pipeline