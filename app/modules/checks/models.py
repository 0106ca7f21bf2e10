# Supabase table: checks
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

checks:
- id: uuid (primary key, default: gen_random_uuid())
- goal_id: uuid (foreign key to goals.id, not null, on delete cascade)
- date: date (not null) - calendar day, no time component
- value: integer (not null, default: 1)
- unique constraint on (goal_id, date)

At most one row per goal per day. Recording a day again overwrites value;
the upsert relies on the (goal_id, date) constraint, never on a prior read.
"""
