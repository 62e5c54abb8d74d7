"""Configuration package for TicketTrack."""
