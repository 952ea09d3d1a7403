"""page_scout.dom: document tree, adapters (HTML, page capture) and the snapshot extractor."""
