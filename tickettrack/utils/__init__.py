"""
Utility modules for TicketTrack.

Cross-cutting concerns:
- Admin: Shared-password gate for privileged operations
"""
