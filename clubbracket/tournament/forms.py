"""Forms for the tournament blueprint.

The API posts JSON; Flask-WTF wraps a JSON body as form data, so the same
validators apply.
"""

from flask_wtf import FlaskForm
from wtforms import IntegerField, StringField, TextAreaField
from wtforms.validators import DataRequired, Length, NumberRange, Optional
from wtforms.validators import ValidationError as FieldValidationError

from clubbracket.bracket.models import parse_tournament_date
from clubbracket.core.constants import MIN_PARTICIPANTS
from clubbracket.errors import ValidationError


class TournamentForm(FlaskForm):
    """Form for creating a tournament."""

    class Meta:
        csrf = False

    name = StringField("Tournament Name", validators=[DataRequired(), Length(max=120)])

    description = TextAreaField("Description", validators=[Optional()])

    # ISO-8601 date or datetime, as sent by a datetime-local input
    date = StringField("Date", validators=[DataRequired()])

    maxParticipants = IntegerField(
        "Max Participants",
        validators=[DataRequired(), NumberRange(min=MIN_PARTICIPANTS, max=1024)],
    )

    clubId = StringField("Club", validators=[DataRequired()])

    def validate_date(self, field):
        """Reject values that are not ISO-8601 dates or datetimes."""
        try:
            parse_tournament_date(field.data)
        except ValidationError:
            raise FieldValidationError("Not a valid ISO-8601 date or datetime.") from None


class JoinTournamentForm(FlaskForm):
    """Form for joining a tournament by display name."""

    class Meta:
        csrf = False

    name = StringField("Your Name", validators=[DataRequired(), Length(max=80)])


class MatchWinnerForm(FlaskForm):
    """Form for selecting the winner of a match."""

    class Meta:
        csrf = False

    winner = StringField("Winner", validators=[DataRequired()])
