from flask import current_app
from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField
from wtforms.validators import DataRequired, Length, ValidationError

NAMES_REQUIRED_MESSAGE = "Veuillez entrer le nom des deux joueurs."


def _max_name_length():
    return current_app.config.get("PLAYER_NAME_MAX_LENGTH", 40)


class PlayerNamesForm(FlaskForm):
    player1 = StringField(
        "Joueur 1",
        validators=[DataRequired(message=NAMES_REQUIRED_MESSAGE)],
        render_kw={"placeholder": "Joueur 1"},
    )
    player2 = StringField(
        "Joueur 2",
        validators=[DataRequired(message=NAMES_REQUIRED_MESSAGE)],
        render_kw={"placeholder": "Joueur 2"},
    )
    submit = SubmitField("Commencer")

    def validate_player1(self, field):
        self._validate_name(field)

    def validate_player2(self, field):
        self._validate_name(field)

    def _validate_name(self, field):
        if not field.data or not field.data.strip():
            raise ValidationError(NAMES_REQUIRED_MESSAGE)
        max_length = _max_name_length()
        Length(max=max_length, message=f"Le nom ne doit pas dépasser {max_length} caractères.")(self, field)
