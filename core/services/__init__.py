"""Services: Supabase data access, catalog domain, money helpers, image storage."""
