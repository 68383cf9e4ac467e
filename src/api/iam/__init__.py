"""Identity and Access Management bounded context.

Authenticates users through personal access tokens and keeps inactive
users out of protected routes.
"""
