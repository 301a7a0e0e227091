"""Routes for the tournament blueprint."""

from __future__ import annotations

from typing import Any

from flask import current_app, jsonify, request
from flask_wtf import FlaskForm

from clubbracket.errors import ValidationError

from . import bp
from .forms import JoinTournamentForm, MatchWinnerForm, TournamentForm
from .services import TournamentService


def _service() -> TournamentService:
    """Build a service around the store configured for this app."""
    return TournamentService(
        current_app.extensions["tournament_store"],
        current_app.extensions.get("id_factory"),
    )


def _validate(form: FlaskForm) -> None:
    """Raise ValidationError with the first field error of ``form``."""
    if form.validate_on_submit():
        return
    for field_name, errors in form.errors.items():
        if errors:
            raise ValidationError(f"{field_name}: {errors[0]}")
    raise ValidationError("A JSON body is required.")


@bp.route("/", methods=["GET"], strict_slashes=False)
def list_tournaments() -> Any:
    """List tournaments, optionally for one club."""
    club_id = request.args.get("clubId") or None
    tournaments = _service().list_tournaments(club_id)
    return jsonify([t.to_dict() for t in tournaments])


@bp.route("/", methods=["POST"], strict_slashes=False)
def create_tournament() -> Any:
    """Create a new tournament."""
    form = TournamentForm()
    _validate(form)
    tournament = _service().create_tournament(
        {
            "name": form.name.data,
            "description": form.description.data,
            "date": form.date.data,
            "max_participants": form.maxParticipants.data,
        },
        club_id=form.clubId.data,
    )
    current_app.logger.info(f"Created tournament {tournament.id}")
    return jsonify(tournament.to_dict()), 201


@bp.route("/<string:tournament_id>", methods=["GET"])
def view_tournament(tournament_id: str) -> Any:
    """View a single tournament snapshot."""
    return jsonify(_service().get_tournament(tournament_id).to_dict())


@bp.route("/<string:tournament_id>/bracket", methods=["GET"])
def view_bracket(tournament_id: str) -> Any:
    """View the bracket grouped into labelled rounds."""
    return jsonify(_service().get_bracket(tournament_id))


@bp.route("/<string:tournament_id>/join", methods=["POST"])
def join_tournament(tournament_id: str) -> Any:
    """Join a tournament by display name."""
    form = JoinTournamentForm()
    _validate(form)
    tournament = _service().join_tournament(tournament_id, form.name.data)
    return jsonify(tournament.to_dict())


@bp.route("/<string:tournament_id>/start", methods=["POST"])
def start_tournament(tournament_id: str) -> Any:
    """Generate the bracket and start play."""
    tournament = _service().start_tournament(tournament_id)
    current_app.logger.info(f"Started tournament {tournament_id}")
    return jsonify(tournament.to_dict())


@bp.route(
    "/<string:tournament_id>/match/<string:match_id>/winner", methods=["POST"]
)
def record_winner(tournament_id: str, match_id: str) -> Any:
    """Record the winner of a match."""
    form = MatchWinnerForm()
    _validate(form)
    tournament = _service().record_winner(tournament_id, match_id, form.winner.data)
    return jsonify(tournament.to_dict())
