from pocketbase_typegen.sources.database import from_database
from pocketbase_typegen.sources.json_file import from_json
from pocketbase_typegen.sources.remote import from_url

__all__ = ["from_database", "from_json", "from_url"]
