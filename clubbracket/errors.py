"""Custom exception classes for the application."""


class AppError(Exception):
    """Base application error class."""

    def __init__(self, message, status_code=400):
        """Initialize the error."""
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ValidationError(AppError):
    """Raised when user input fails validation."""

    def __init__(self, message="Validation failed."):
        """Initialize the error."""
        super().__init__(message, 400)


class NotFoundError(AppError):
    """Raised when a resource is not found."""

    def __init__(self, message="Resource not found."):
        """Initialize the error."""
        super().__init__(message, 404)


class ConflictError(AppError):
    """Raised when a command conflicts with the current tournament state."""

    def __init__(self, message="Conflict with current state."):
        """Initialize the error."""
        super().__init__(message, 409)


class TournamentNotFoundError(NotFoundError):
    """Raised when no tournament exists for the given id."""

    def __init__(self, tournament_id):
        """Initialize the error."""
        super().__init__(f"Tournament {tournament_id} not found.")
        self.tournament_id = tournament_id


class MatchNotFoundError(NotFoundError):
    """Raised when a match id is not part of the bracket."""

    def __init__(self, match_id):
        """Initialize the error."""
        super().__init__(f"Match {match_id} not found.")
        self.match_id = match_id


class DuplicateParticipantError(ConflictError):
    """Raised when a participant name is already taken in a tournament."""

    def __init__(self, name):
        """Initialize the error."""
        super().__init__(f"{name} has already joined this tournament.")
        self.name = name


class TournamentFullError(ConflictError):
    """Raised when joining a tournament that has reached capacity."""

    def __init__(self, max_participants):
        """Initialize the error."""
        super().__init__(
            f"Tournament is full ({max_participants} participants maximum)."
        )
        self.max_participants = max_participants


class InsufficientParticipantsError(ConflictError):
    """Raised when a bracket is requested for fewer than two participants."""

    def __init__(self, count, minimum=2):
        """Initialize the error."""
        super().__init__(
            f"At least {minimum} participants are required, got {count}."
        )
        self.count = count


class IllegalStateTransitionError(ConflictError):
    """Raised when an operation is not allowed in the tournament's status."""

    def __init__(self, message="Operation not allowed in the current state."):
        """Initialize the error."""
        super().__init__(message)


class MatchNotReadyError(IllegalStateTransitionError):
    """Raised when a winner is recorded before a match's players are known."""

    def __init__(self, match_id):
        """Initialize the error."""
        super().__init__(f"Match {match_id} is still waiting for its players.")
        self.match_id = match_id


class InvalidWinnerError(ValidationError):
    """Raised when the winner is not one of the match's players."""

    def __init__(self, winner, match_id):
        """Initialize the error."""
        super().__init__(f"{winner} is not a player in match {match_id}.")
        self.winner = winner
        self.match_id = match_id
