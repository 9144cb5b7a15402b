from typing import List

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

import config
import db
from logger import setup_logger

logger = setup_logger("vsm.app")

app = FastAPI(title="Movie Search")
app.state.model = None


class SearchResult(BaseModel):
    id: int
    title: str
    genres: str
    score: float


def _get_model():
    model = app.state.model
    if model is None:
        raise HTTPException(status_code=503, detail="Index not initialized. Please run initialization first.")
    return model


@app.get("/search", response_model=List[SearchResult])
def search_movies(
    q: str = Query(...),
    top_k: int = Query(config.DEFAULT_TOP_K, ge=1, le=config.MAX_TOP_K),
):
    model = _get_model()
    hits = model.search(q, top_k=top_k)
    return [
        SearchResult(id=movie.id, title=movie.title, genres=movie.genres, score=score)
        for movie, score in hits
    ]


@app.get("/status")
def get_status():
    """Report whether a model is loaded and how large it is."""
    model = app.state.model
    if model is None:
        return {"document_count": 0, "vocabulary_size": 0, "status": "not_ready"}
    return {
        "document_count": model.corpus_size,
        "vocabulary_size": len(model.vocabulary),
        "status": "ready",
    }


@app.post("/initialize")
def initialize_system():
    """Rebuild the model from the movies table."""
    try:
        model = db.initialize_model()
    except Exception as e:
        logger.error("Initialization failed: %s", e)
        raise HTTPException(status_code=500, detail=f"Initialization error: {str(e)}")
    app.state.model = model
    return {
        "message": "System initialized successfully",
        "document_count": model.corpus_size,
        "vocabulary_size": len(model.vocabulary),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host=config.API_HOST, port=config.API_PORT, reload=True)
