from app.auth.permissions import DEFAULT_POLICY, BlogOperation, MutationPolicy

__all__ = ["DEFAULT_POLICY", "BlogOperation", "MutationPolicy"]
