"""
Seed bootstrap data.

Sample records written to a freshly created local store so the dashboard
has something to show.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from tickettrack.models.survey import SurveyRecord

# (ticket_id, customer_id, ease, process, solution, comment, days_ago)
SEED_TEMPLATES = [
    ("1001", "joao@empresa.com", 4, 5, 5,
     "Opening the ticket was very easy and the technician arrived on time.", 5),
    ("1024", "maria.s@client.org", 2, 3, 4,
     "The ticket system is confusing, but the technician fixed it.", 4),
    ("1035", "admin@tech.net", 5, 5, 5,
     "Perfect process from start to finish.", 3),
    ("1042", "roberto@loja.com", 1, 2, 3,
     "It took a while to open the ticket and the visit was scheduled wrong.", 2),
    ("1055", "ana@startup.io", 3, 3, 4,
     "Good service, but scheduling took too long.", 1),
    ("1068", "carlos.m@dev.co", 5, 4, 5,
     "Fast and efficient.", 0),
    ("1072", "julia@design.studio", 2, 2, 2,
     "The technician did not bring the parts needed to finish the job.", 0),
]


def build_seed_records(now: Optional[datetime] = None) -> List[SurveyRecord]:
    """
    Build the seed set with timestamps staggered a day apart, ending at now.

    Args:
        now: Reference time (defaults to current UTC time)

    Returns:
        Seed records, oldest first
    """
    now = now or datetime.now(timezone.utc)

    records = []
    for ticket_id, customer_id, ease, process, solution, comment, days_ago in SEED_TEMPLATES:
        records.append(SurveyRecord(
            id=uuid.uuid4().hex,
            ticket_id=ticket_id,
            customer_id=customer_id,
            ease_rating=ease,
            process_rating=process,
            solution_rating=solution,
            comment=comment,
            timestamp=(now - timedelta(days=days_ago)).isoformat()
        ))

    return records
