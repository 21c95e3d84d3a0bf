"""Tests for project search filters and pagination."""

import math

import pytest

from projectmatch.exceptions import BadRequestError
from projectmatch.schemas.project import SearchCriteria
from projectmatch.services import ProjectSearchEngine
from projectmatch.stores import ProjectStore


def ids(page):
    return [project.id for project in page.items]


class TestFilters:
    async def test_keyword_matches_title(self, search_engine, catalogue):
        page = await search_engine.search(SearchCriteria(keyword="water"))

        assert ids(page) == [catalogue.clean_water.id]

    async def test_keyword_is_case_insensitive_and_matches_description(self, search_engine, catalogue):
        page = await search_engine.search(SearchCriteria(keyword="TUTORING"))

        assert ids(page) == [catalogue.education.id]

    async def test_keyword_wildcards_are_literal(self, search_engine, catalogue):
        percent = await search_engine.search(SearchCriteria(keyword="%"))
        underscore = await search_engine.search(SearchCriteria(keyword="_"))

        assert ids(percent) == [catalogue.archive.id]
        assert ids(underscore) == []

    async def test_blank_keyword_is_ignored(self, search_engine, catalogue):
        page = await search_engine.search(SearchCriteria(keyword="   "))

        assert page.total == 4

    async def test_status_active(self, search_engine, catalogue):
        page = await search_engine.search(SearchCriteria(status="A"))

        assert set(ids(page)) == {catalogue.clean_water.id, catalogue.education.id, catalogue.food_bank.id}
        assert all(project.status == "A" for project in page.items)

    async def test_status_closed(self, search_engine, catalogue):
        page = await search_engine.search(SearchCriteria(status="C"))

        assert ids(page) == [catalogue.archive.id]

    async def test_remote(self, search_engine, catalogue):
        remote = await search_engine.search(SearchCriteria(remote="Y"))
        on_site = await search_engine.search(SearchCriteria(remote="N"))

        assert ids(remote) == [catalogue.clean_water.id, catalogue.archive.id]
        assert all(project.remote for project in remote.items)
        assert ids(on_site) == [catalogue.education.id, catalogue.food_bank.id]

    async def test_job_titles_match_any(self, search_engine, catalogue):
        page = await search_engine.search(SearchCriteria(job_titles=[catalogue.developer.id]))

        assert ids(page) == [catalogue.clean_water.id, catalogue.food_bank.id]

    async def test_job_titles_union_has_no_duplicates(self, search_engine, catalogue):
        page = await search_engine.search(
            SearchCriteria(job_titles=[catalogue.developer.id, catalogue.designer.id])
        )

        assert page.total == 4
        assert len(set(ids(page))) == 4

    async def test_skills(self, search_engine, catalogue):
        page = await search_engine.search(SearchCriteria(skills=[catalogue.writing.id]))

        assert ids(page) == [catalogue.education.id, catalogue.archive.id]

    async def test_filters_combine_with_and(self, search_engine, catalogue):
        page = await search_engine.search(SearchCriteria(
            status="A", remote="N", skills=[catalogue.python.id],
        ))

        assert ids(page) == [catalogue.food_bank.id]

    async def test_unknown_ids_match_nothing(self, search_engine, catalogue):
        page = await search_engine.search(SearchCriteria(skills=[9999]))

        assert page.total == 0
        assert page.items == []

    @pytest.mark.parametrize("criteria", [
        SearchCriteria(keyword="a"),
        SearchCriteria(status="A"),
        SearchCriteria(status="C"),
        SearchCriteria(remote="Y"),
        SearchCriteria(remote="N"),
        SearchCriteria(job_titles=[1]),
        SearchCriteria(skills=[2], status="A"),
    ])
    async def test_unfiltered_is_superset(self, search_engine, catalogue, criteria):
        unfiltered = await search_engine.search(SearchCriteria(size=100))
        filtered = await search_engine.search(criteria.model_copy(update={"size": 100}))

        assert set(ids(filtered)) <= set(ids(unfiltered))


class TestScenario:
    """Two active projects: clean water (remote) and education (on site)."""

    @pytest.fixture
    async def two_projects(self, db, catalogue):
        await db.delete(catalogue.archive)
        await db.delete(catalogue.food_bank)
        await db.flush()
        return catalogue

    async def test_keyword(self, search_engine, two_projects):
        page = await search_engine.search(SearchCriteria(keyword="water"))
        assert ids(page) == [two_projects.clean_water.id]

    async def test_remote(self, search_engine, two_projects):
        page = await search_engine.search(SearchCriteria(remote="Y"))
        assert ids(page) == [two_projects.clean_water.id]

    async def test_closed(self, search_engine, two_projects):
        page = await search_engine.search(SearchCriteria(status="C"))
        assert ids(page) == []
        assert page.total == 0


class TestPagination:
    async def test_defaults(self, search_engine, catalogue):
        page = await search_engine.search()

        assert page.page == 0
        assert page.size == 10
        assert page.total == 4
        assert page.total_pages == 1

    async def test_newest_first(self, search_engine, catalogue):
        page = await search_engine.search()

        assert ids(page) == [
            catalogue.clean_water.id,
            catalogue.education.id,
            catalogue.food_bank.id,
            catalogue.archive.id,
        ]

    @pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
    async def test_pages_cover_total_without_duplicates(self, search_engine, catalogue, size):
        first = await search_engine.search(SearchCriteria(size=size))
        pages = math.ceil(first.total / size)
        assert first.total_pages == pages

        seen = []
        for number in range(pages):
            page = await search_engine.search(SearchCriteria(page=number, size=size))
            assert len(page.items) <= size
            seen.extend(ids(page))

        assert len(seen) == first.total
        assert len(set(seen)) == first.total

    async def test_page_past_end_is_empty(self, search_engine, catalogue):
        page = await search_engine.search(SearchCriteria(page=5, size=2))

        assert page.items == []
        assert page.total == 4


class TestValidation:
    @pytest.mark.parametrize("criteria", [
        SearchCriteria(status="N"),
        SearchCriteria(status="AC"),
        SearchCriteria(status="a"),
        SearchCriteria(status=""),
        SearchCriteria(remote="yes"),
        SearchCriteria(remote=""),
        SearchCriteria(page=-1),
        SearchCriteria(size=0),
        SearchCriteria(size=101),
    ])
    async def test_rejects_before_querying(self, criteria):
        class ExplodingStore:
            async def search(self, criteria):
                raise AssertionError("store must not be queried")

        engine = ProjectSearchEngine(ExplodingStore())

        with pytest.raises(BadRequestError):
            await engine.search(criteria)

    async def test_normalize_dedupes_ids(self, db):
        engine = ProjectSearchEngine(ProjectStore(db))

        criteria = engine.normalize(SearchCriteria(job_titles=[3, 1, 3], skills=[], keyword=" water "))

        assert criteria.job_titles == [1, 3]
        assert criteria.skills is None
        assert criteria.keyword == "water"


class TestDefaultStatus:
    async def test_applied_when_status_omitted(self, db, catalogue):
        engine = ProjectSearchEngine(ProjectStore(db), default_status="A")

        page = await engine.search()

        assert catalogue.archive.id not in ids(page)
        assert page.total == 3

    async def test_explicit_status_wins(self, db, catalogue):
        engine = ProjectSearchEngine(ProjectStore(db), default_status="A")

        page = await engine.search(SearchCriteria(status="C"))

        assert ids(page) == [catalogue.archive.id]

    async def test_custom_page_size(self, db, catalogue):
        engine = ProjectSearchEngine(ProjectStore(db), default_page_size=3)

        page = await engine.search()

        assert page.size == 3
        assert len(page.items) == 3
        assert page.total_pages == 2
