"""
Services Package

Extraction services for EPUB archives and PDF documents, plus the pure
progress and bookmark helpers used at the persistence boundary. Import the
service modules directly (for example ``folio.services.epub_service``); this
package module stays import-free so the models can depend on
``folio.services.progress`` without a cycle.
"""
