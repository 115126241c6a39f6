"""Infrastructure adapters: storage, text export and PDF rendering."""
