"""Global constants for the clubbracket application."""

# Firestore collections
TOURNAMENTS_COLLECTION = "tournaments"

# Store backends selectable through the TOURNAMENT_STORE setting
STORE_MEMORY = "memory"
STORE_FIRESTORE = "firestore"

# Bracket rules
MIN_PARTICIPANTS = 2
