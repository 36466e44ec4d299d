"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services receive their repositories and collaborators through the
constructor, validate input, and report failures through Result.
"""
