"""
Tests pour FilmReadService et parse_id.

Les lectures sont testees contre le repository SQLModel en memoire ;
les cas limites de delegation utilisent un repository mocke.
"""

import pytest

from filmcatalog.core.exceptions import EmptyCollectionError, NotFoundError
from filmcatalog.core.value_objects import Pageable, Slice, Suchparameter
from filmcatalog.services.film_service import FilmReadService, parse_id


class TestParseId:
    """Tests pour la conversion des IDs externes."""

    @pytest.mark.parametrize("value,expected", [("1", 1), ("42", 42), (7, 7)])
    def test_valid_ids(self, value, expected):
        assert parse_id(value) == expected

    @pytest.mark.parametrize("value", [None, "", "0", "01", "-1", "abc", "1.0", 0, -5])
    def test_invalid_ids(self, value):
        assert parse_id(value) is None


class TestFindById:
    """Tests pour find_by_id."""

    @pytest.mark.asyncio
    async def test_found(self, read_service, write_service, make_film):
        film_id = await write_service.create(make_film())

        film = await read_service.find_by_id(film_id)
        assert film.id == film_id
        assert film.schauspieler is None

    @pytest.mark.asyncio
    async def test_found_with_details(self, read_service, write_service, make_film):
        film_id = await write_service.create(make_film())

        film = await read_service.find_by_id(film_id, mit_details=True)
        assert len(film.schauspieler) == 2

    @pytest.mark.asyncio
    async def test_not_found(self, read_service):
        with pytest.raises(NotFoundError) as exc_info:
            await read_service.find_by_id(999)
        assert exc_info.value.film_id == 999

    @pytest.mark.asyncio
    async def test_missing_id_does_not_query(self, mock_repository):
        """Un ID absent leve NotFoundError sans acces au repository."""
        service = FilmReadService(mock_repository)

        with pytest.raises(NotFoundError):
            await service.find_by_id(None)
        mock_repository.get_by_id.assert_not_called()


class TestFindAll:
    """Tests pour find_all."""

    @pytest.mark.asyncio
    async def test_empty_store_is_an_error(self, read_service):
        with pytest.raises(EmptyCollectionError):
            await read_service.find_all()

    @pytest.mark.asyncio
    async def test_empty_collection_is_a_not_found(self, read_service):
        """EmptyCollectionError est traitee comme un NotFoundError par les adaptateurs."""
        with pytest.raises(NotFoundError):
            await read_service.find_all()

    @pytest.mark.asyncio
    async def test_returns_all_films(self, read_service, write_service, make_film):
        await write_service.create(make_film())
        await write_service.create(make_film(imdb_id="tt0102926", titel="Zweiter"))

        filme = await read_service.find_all()
        assert [f.titel for f in filme] == ["The Matrix", "Zweiter"]


class TestFind:
    """Tests pour find et count."""

    @pytest.mark.asyncio
    async def test_no_match_is_not_an_error(self, read_service):
        result = await read_service.find(Suchparameter(titel="nichts"), Pageable())
        assert result.content == []
        assert result.total_elements == 0

    @pytest.mark.asyncio
    async def test_defaults(self, mock_repository):
        """Sans arguments : tous les films, premiere page de 5."""
        mock_repository.find.return_value = Slice(content=[], total_elements=0)
        service = FilmReadService(mock_repository)

        await service.find()

        mock_repository.find.assert_awaited_once_with(Suchparameter(), Pageable(number=0, size=5))

    @pytest.mark.asyncio
    async def test_count(self, read_service, write_service, make_film):
        assert await read_service.count() == 0
        await write_service.create(make_film())
        assert await read_service.count() == 1
