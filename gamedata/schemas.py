from marshmallow import Schema, fields, post_load
from marshmallow.validate import Length, Range
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema, auto_field

from gamedata.domain import Bet, PaytableConfiguration, ProgressiveWinGroup, WinData
from gamedata.models import GameConfiguration


# --- Request Schemas ---
class BetSchema(Schema):
    total_bet = fields.Int(required=True, validate=Range(min=0))
    sub_bet = fields.Int(required=True, validate=Range(min=0), metadata={"description": "Number of lines"})
    bet_per_sub_bet = fields.Int(required=True, validate=Range(min=0))
    extra_bet = fields.Int(load_default=0, validate=Range(min=0))
    side_bet = fields.Int(load_default=0, validate=Range(min=0))
    persistence_id = fields.Int(load_default=0)
    # Bet keeps custom sub bets frozen; the mapping view is `custom_bets`.
    custom_bet_data = fields.Dict(
        keys=fields.Str(validate=Length(min=1)),
        values=fields.Int(),
        attribute="custom_bets",
        load_default=dict,
    )
    bet_id = fields.Str(allow_none=True, load_default=None)

    @post_load
    def make_bet(self, data, **kwargs):
        custom_bets = data.pop("custom_bets", None) or {}
        return Bet(custom_bet_data=custom_bets, **data)


class PaytableConfigurationSchema(Schema):
    paytable_id = fields.Int(required=True)
    denomination = fields.Int(load_default=1, validate=Range(min=1))

    @post_load
    def make_paytable(self, data, **kwargs):
        return PaytableConfiguration(**data)


# --- Result Schemas ---
class ProgressiveWinGroupSchema(Schema):
    level = fields.Int(required=True, validate=Range(min=0))
    count = fields.Int(required=True, validate=Range(min=0))

    @post_load
    def make_group(self, data, **kwargs):
        return ProgressiveWinGroup(**data)


class WinDataSchema(Schema):
    total_win = fields.Int(required=True)
    game_section_mask = fields.Int(load_default=0)
    progressives = fields.List(fields.Nested(ProgressiveWinGroupSchema), load_default=list)
    outcome_id = fields.Str(allow_none=True, load_default=None)

    @post_load
    def make_win_data(self, data, **kwargs):
        return WinData(**data)


class GameDataSchema(Schema):
    random_numbers = fields.List(fields.Int(), dump_only=True)
    outcome_id = fields.Str(dump_only=True)


class EvaluationDataSchema(Schema):
    win_data = fields.Nested(WinDataSchema, dump_only=True)
    game_data = fields.Nested(GameDataSchema, dump_only=True)


# --- Stored Configuration Schemas ---
class GameConfigurationSchema(SQLAlchemyAutoSchema):
    class Meta:
        model = GameConfiguration
        include_fk = True

    id = auto_field(dump_only=True)
    is_linear = auto_field(metadata={"description": "Outcomes may be scaled to integer multiples of total_bet"})
