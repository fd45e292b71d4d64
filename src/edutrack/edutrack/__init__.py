"""EduTrack attendance reconciliation package.

Feature modules (attendance, hours, schedules, ...) hold pure domain logic;
a thin Flask controller layer exposes it as a JSON API.
"""
