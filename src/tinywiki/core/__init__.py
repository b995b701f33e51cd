"""Core wiki components: models, storage, link and template rendering."""
