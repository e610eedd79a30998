"""
HealthVerse backend.

Mood tracking, brain games, meditation and a healthcare chatbot.
"""
