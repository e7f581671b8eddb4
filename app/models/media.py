from sqlalchemy import JSON, Text
from sqlalchemy.dialects.postgresql import ARRAY

# TEXT[] en PostgreSQL; JSON en SQLite (tests)
MediaUrls = ARRAY(Text).with_variant(JSON(), "sqlite")
