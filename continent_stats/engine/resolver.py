"""Country resolver — continent -> regions -> countries."""

from continent_stats.repositories.base import AbstractCatalogReader


class CountryResolver:
    """Resolves the countries transitively linked to a continent via regions."""

    def __init__(self, reader: AbstractCatalogReader) -> None:
        self._reader = reader

    async def resolve(self, continent_id: int) -> frozenset[int]:
        """Country ids for the continent.

        A continent with no regions, or whose regions hold no countries,
        resolves to the empty set.
        """
        country_ids = await self._reader.list_country_ids_by_continent(continent_id)
        return frozenset(country_ids)
