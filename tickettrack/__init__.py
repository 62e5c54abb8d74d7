"""
TicketTrack - customer-satisfaction surveys for support tickets.

Packages:
- models: SurveyRecord and AnalysisResult
- store: Persistence backends (local JSON file, remote HTTP collection)
- intake: Submission validation and the duplicate-ticket guard
- insights: Metrics, CSV export and the Gemini summarizer
"""
