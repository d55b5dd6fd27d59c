"""
MuseMind poem generation backend.

Provides:
- Themed prompt building for the lovelines / moodverse / soulscript forms
- A Gemini generateContent client with a hard request deadline
- Poem normalization and a FastAPI service exposing POST /api/generate-poem
"""
