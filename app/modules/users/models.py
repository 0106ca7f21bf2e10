# Supabase table: users
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py
# See app/database/schema.sql for the DDL

"""
Expected Supabase table structure:

users:
- id: uuid (primary key, default: gen_random_uuid())
- auth_user_id: uuid (unique, not null) - auth.users.id of the Supabase identity
- email: text (not null, default: '')
- name: text (nullable)
- role: text (not null, default: 'MEMBER') - values: ADMIN, MEMBER
- team_id: uuid (foreign key to teams.id, nullable, on delete set null)
- created_at: timestamp (default: now())

A user belongs to at most one team. role is ADMIN only for the user who
created their current team; joining or leaving a team resets it to MEMBER.
"""
