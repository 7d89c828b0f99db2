from dotenv import load_dotenv
load_dotenv()

from .config import SearchConfig
from .client import SearchClient
from .search import date_range_query, semantic_query
from .utils import format_hits
