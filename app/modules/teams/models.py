# Supabase table: teams
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

teams:
- id: uuid (primary key, default: gen_random_uuid())
- name: text (not null)
- invite_code: text (unique, not null) - opaque token; the only way to join
- created_at: timestamp (default: now())

Membership is users.team_id; a team has no member table of its own. The
creator becomes ADMIN. Rotating invite_code invalidates the previous code
immediately. Teams are never deleted when their last member or admin leaves.
"""
