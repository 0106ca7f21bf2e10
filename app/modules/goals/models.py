# Supabase table: goals
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

goals:
- id: uuid (primary key, default: gen_random_uuid())
- user_id: uuid (foreign key to users.id, not null, on delete cascade) - owner
- team_id: uuid (foreign key to teams.id, nullable, on delete set null)
  - owner's team when the goal was created; not kept in sync afterwards
- title: text (not null)
- target_count: integer (not null, > 0)
- unit: text (not null)
- category: text (nullable)
- notes: text (nullable)
- status: text (nullable)
- month: date (not null) - first day of the month the goal belongs to
- start_date: date (nullable)
- end_date: date (nullable)
- created_at: timestamp (default: now())

Only the owner reads or mutates a goal. Deleting it cascades to its checks.
"""
