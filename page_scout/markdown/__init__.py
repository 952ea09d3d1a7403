"""page_scout.markdown: Markdown rendering of a page's main content."""
