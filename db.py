import os
import sqlite3
from typing import Optional

import pandas as pd
from pydantic import BaseModel

import config
from logger import setup_logger
from model import VectorSpaceModel
from rules import get_rule

logger = setup_logger("vsm.db")


class Movie(BaseModel):
    id: int
    title: str
    genres: str = ""

    def get_text(self) -> str:
        # Genres are stored pipe separated: "Adventure|Animation"
        return f"{self.title} | {self.genres.replace('|', ' ')}"


def convert_csv_to_sqlite(csv_path: Optional[str] = None, db_path: Optional[str] = None) -> int:
    """Load the movies CSV into the SQLite table, replacing its contents."""
    csv_path = csv_path or config.CSV_DATASET_PATH
    db_path = db_path or config.SQL_DB_PATH
    if not os.path.exists(csv_path):
        raise FileNotFoundError(f"CSV dataset not found at: {csv_path}")

    df = pd.read_csv(csv_path)
    conn = sqlite3.connect(db_path)
    try:
        df.to_sql(config.TABLE_NAME, conn, if_exists="replace", index=False)
    finally:
        conn.close()
    logger.info("Converted %d rows from %s into %s", len(df), csv_path, db_path)
    return len(df)


def load_movies(db_path: Optional[str] = None) -> list[Movie]:
    """Read every movie from SQLite, in table order."""
    db_path = db_path or config.SQL_DB_PATH
    if not os.path.exists(db_path):
        raise FileNotFoundError(f"SQLite database not found at: {db_path}. Please initialize it first.")

    conn = sqlite3.connect(db_path)
    try:
        df = pd.read_sql_query(
            f"SELECT movieId, title, genres FROM {config.TABLE_NAME} ORDER BY rowid", conn
        )
    finally:
        conn.close()

    df["title"] = df["title"].fillna("")
    df["genres"] = df["genres"].fillna("")
    movies = [
        Movie(id=int(row.movieId), title=str(row.title), genres=str(row.genres))
        for row in df.itertuples(index=False)
    ]
    logger.info("Loaded %d movies from %s", len(movies), db_path)
    return movies


def initialize_model(db_path: Optional[str] = None) -> VectorSpaceModel:
    """Build a search model over the movies table using the configured rule and schemes."""
    movies = load_movies(db_path)
    return VectorSpaceModel(
        movies,
        rule=get_rule(config.NORMALIZATION_RULE),
        tf_scheme=config.TF_SCHEME,
        idf_scheme=config.IDF_SCHEME,
    )


if __name__ == "__main__":
    convert_csv_to_sqlite(config.CSV_DATASET_PATH, config.SQL_DB_PATH)
    search_model = initialize_model(config.SQL_DB_PATH)
    logger.info(
        "Index ready: %d documents, %d terms",
        search_model.corpus_size, len(search_model.vocabulary),
    )
