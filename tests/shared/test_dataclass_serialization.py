"""Tests for dataclass (de)serialization helpers."""

from __future__ import annotations

import pytest

from cinecache.shared.models.movie import MovieDetail, MovieSummary, TrendingResponse
from cinecache.shared.utils import from_dict, to_dict


class TestFromDictFailures:
    """Invalid payloads are rejected."""

    def test_missing_required_field(self) -> None:
        with pytest.raises(KeyError):
            from_dict(MovieSummary, {"title": "No id"})

    def test_not_a_mapping(self) -> None:
        with pytest.raises(TypeError):
            from_dict(TrendingResponse, [1, 2])  # type: ignore[arg-type]

    def test_bool_rejected_for_int(self) -> None:
        with pytest.raises(TypeError):
            from_dict(MovieSummary, {"id": True, "title": "Bool"})

    def test_null_for_required_text(self) -> None:
        with pytest.raises(TypeError):
            from_dict(MovieSummary, {"id": 1, "title": None})

    def test_list_field_with_wrong_type(self) -> None:
        with pytest.raises(TypeError):
            from_dict(TrendingResponse, {"results": {"id": 1}})

    def test_forbid_extra_fields(self) -> None:
        with pytest.raises(TypeError):
            from_dict(MovieSummary, {"id": 1, "title": "A", "runtime": 90}, extra="forbid")

    def test_non_dataclass_target(self) -> None:
        with pytest.raises(TypeError):
            from_dict(dict, {})


class TestFromDict:
    def test_ignores_unknown_fields_and_fills_defaults(self) -> None:
        # When
        movie = from_dict(MovieSummary, {"id": 1, "title": "A", "popularity": 99.5})

        # Then
        assert movie == MovieSummary(id=1, title="A", overview="", poster_path=None)

    def test_optional_poster_accepts_null(self) -> None:
        movie = from_dict(MovieDetail, {"id": 1, "title": "A", "poster_path": None})

        assert movie.poster_path is None

    def test_nested_results(self) -> None:
        # When
        response = from_dict(
            TrendingResponse,
            {"page": 2, "results": [{"id": 1, "title": "A"}, {"id": 2, "title": "B"}]},
        )

        # Then
        assert response.page == 2
        assert [movie.title for movie in response.results] == ["A", "B"]


class TestToDict:
    def test_converts_dataclass(self) -> None:
        movie = MovieSummary(id=5, title="Dune", poster_path="/dune.jpg")

        assert to_dict(movie) == {
            "id": 5,
            "title": "Dune",
            "overview": "",
            "poster_path": "/dune.jpg",
        }

    def test_rejects_non_dataclass(self) -> None:
        with pytest.raises(TypeError):
            to_dict({"id": 5})


class TestMovieDetailFromSummary:
    def test_copies_every_field(self) -> None:
        summary = MovieSummary(id=5, title="Dune", overview="Spice.", poster_path="/dune.jpg")

        detail = MovieDetail.from_summary(summary)

        assert detail == MovieDetail(id=5, title="Dune", overview="Spice.", poster_path="/dune.jpg")
