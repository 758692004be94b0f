"""
In-memory recipe storage.

Responsibilities:
- Hold users, recipes and favorites for the lifetime of the process.
- Assign sequential ids and apply create/update/delete operations.
- Filter and sort recipes for search requests.
- Resolve per-user favorites against the recipe collection.
"""
