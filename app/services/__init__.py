"""
Services Package

Logic used by the routers, kept free of HTTP concerns:
- book_store.py: Entity store over a SQLAlchemy session
- links.py: Hypermedia link builders
- mapper.py: Book → BookResponse mapping
- validation.py: Required-field checks for create/update
"""
