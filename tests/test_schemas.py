import pytest
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from movie_graph.schemas import Movie, MovieResult


def render(results):
    return JSONResponse(content=[r.model_dump(exclude_none=True) for r in results]).body


def test_movie_result_wire_shape():
    result = MovieResult(movie=Movie(title="Jerry Maguire", released=1996))

    assert render([result]) == b'[{"movie":{"released":1996,"title":"Jerry Maguire"}}]'


def test_empty_title_is_omitted():
    result = MovieResult(movie=Movie(title="", released=1999))

    assert result.movie.title is None
    assert render([result]) == b'[{"movie":{"released":1999}}]'


def test_missing_title_is_omitted():
    result = MovieResult(movie=Movie(released=2003))

    assert "title" not in result.model_dump(exclude_none=True)["movie"]


@pytest.mark.parametrize("released", ["1996", 1996.0, True, None])
def test_released_must_be_an_int(released):
    with pytest.raises(ValidationError):
        Movie(title="The Matrix", released=released)


def test_released_fits_in_64_bits():
    Movie(released=2**63 - 1)
    with pytest.raises(ValidationError):
        Movie(released=2**63)


def test_title_must_be_a_string():
    with pytest.raises(ValidationError):
        Movie(title=42, released=1999)
