import pytest

import config
import db
from model import EmptyCorpus


def test_movie_text_splits_genres():
    movie = db.Movie(id=1, title="Toy Story (1995)", genres="Adventure|Animation")
    assert movie.get_text() == "Toy Story (1995) | Adventure Animation"


def test_convert_csv_to_sqlite_missing_csv(tmp_path):
    with pytest.raises(FileNotFoundError):
        db.convert_csv_to_sqlite(str(tmp_path / "missing.csv"), str(tmp_path / "out.sqlite"))


def test_load_movies_in_table_order(movies_db):
    movies = db.load_movies()
    assert [movie.id for movie in movies] == [1, 2, 3, 4, 5]
    assert movies[3].title == "Heat (1995)"
    assert movies[3].genres == "Action|Crime|Thriller"


def test_load_movies_missing_database(tmp_path):
    with pytest.raises(FileNotFoundError):
        db.load_movies(str(tmp_path / "nothing.sqlite"))


def test_initialize_model_searches_movies(movies_db):
    search_model = db.initialize_model()
    assert search_model.corpus_size == 5
    hits = search_model.search("toy", top_k=2)
    assert {movie.id for movie, _ in hits} == {1, 5}
    assert all(score > 0 for _, score in hits)


def test_initialize_model_uses_configured_schemes(movies_db, monkeypatch):
    monkeypatch.setattr(config, "IDF_SCHEME", "smooth")
    monkeypatch.setattr(config, "NORMALIZATION_RULE", "separator")
    search_model = db.initialize_model()
    assert search_model.idf_scheme == "smooth"
    assert search_model.rule.name == "separator"


def test_initialize_model_empty_table(tmp_path, monkeypatch):
    csv_path = tmp_path / "empty.csv"
    csv_path.write_text("movieId,title,genres\n", encoding="utf-8")
    db_path = tmp_path / "empty.sqlite"
    db.convert_csv_to_sqlite(str(csv_path), str(db_path))
    with pytest.raises(EmptyCorpus):
        db.initialize_model(str(db_path))
