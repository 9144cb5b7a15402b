import pytest

import config
import db


@pytest.fixture
def movies_csv(tmp_path):
    path = tmp_path / "movies.csv"
    path.write_text(
        "movieId,title,genres\n"
        "1,Toy Story (1995),Adventure|Animation|Children|Comedy|Fantasy\n"
        "2,Jumanji (1995),Adventure|Children|Fantasy\n"
        "3,Grumpier Old Men (1995),Comedy|Romance\n"
        "4,Heat (1995),Action|Crime|Thriller\n"
        "5,Toy Soldiers (1991),Action|Drama\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def movies_db(tmp_path, movies_csv, monkeypatch):
    db_path = tmp_path / "movies.sqlite"
    monkeypatch.setattr(config, "CSV_DATASET_PATH", str(movies_csv))
    monkeypatch.setattr(config, "SQL_DB_PATH", str(db_path))
    db.convert_csv_to_sqlite()
    return db_path
