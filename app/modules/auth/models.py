# Supabase Auth
# Identity lives entirely in Supabase's auth.users table. This API never
# registers or logs users in; the client signs in with Supabase directly and
# sends the resulting access token as "Authorization: Bearer <token>".

"""
Supabase Auth provides:
- auth.get_user(jwt=...) - Verify an access token and return the auth user

Fields read from the auth user:
- id: uuid - stored as users.auth_user_id
- email: text
- user_metadata.full_name: text (optional) - stored as users.name
"""
