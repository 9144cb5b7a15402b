import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Dataset
CSV_DATASET_PATH = os.getenv("VSM_CSV_PATH", os.path.join(BASE_DIR, "movies.csv"))
SQL_DB_PATH = os.getenv("VSM_DB_PATH", os.path.join(BASE_DIR, "movies.sqlite"))
TABLE_NAME = os.getenv("VSM_TABLE", "movies")

# Index
NORMALIZATION_RULE = os.getenv("VSM_RULE", "punctuation")
TF_SCHEME = os.getenv("VSM_TF_SCHEME", "raw")
IDF_SCHEME = os.getenv("VSM_IDF_SCHEME", "plain")

# Search API
DEFAULT_TOP_K = int(os.getenv("VSM_DEFAULT_TOP_K", "5"))
MAX_TOP_K = int(os.getenv("VSM_MAX_TOP_K", "100"))
API_HOST = os.getenv("VSM_HOST", "0.0.0.0")
API_PORT = int(os.getenv("VSM_PORT", "8000"))

LOG_LEVEL = os.getenv("VSM_LOG_LEVEL", "INFO")
