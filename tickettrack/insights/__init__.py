"""
Insights over the record collection.

- metrics: Totals, averages, recent trend, table filtering
- export: Semicolon-delimited CSV
- summarizer: Gemini executive summary
"""
