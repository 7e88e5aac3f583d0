from sqlalchemy import BigInteger, Boolean, Column, ForeignKey, Index, Integer, LargeBinary, String, Text
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    pass


class BetConfiguration(Base):
    __tablename__ = 'BetConfiguration'
    id = Column('Id', Integer, primary_key=True)
    lines = Column('Lines', Integer, nullable=False)
    bet_per_line = Column('BetPerLine', Integer, nullable=False)
    side_bet = Column('SideBet', Integer, default=0, nullable=False)
    extra_bet = Column('ExtraBet', Integer, default=0, nullable=False)
    custom_bet_info = Column('CustomBetInfo', Text, default='', nullable=False)

    game_configurations = relationship('GameConfiguration', back_populates='bet_configuration', lazy=True)

    __table_args__ = (
        Index('ix_bet_configuration_shape', 'Lines', 'CustomBetInfo'),
    )

    def __repr__(self):
        return f"<BetConfiguration {self.id} (Lines: {self.lines}, BetPerLine: {self.bet_per_line})>"


class GameConfiguration(Base):
    __tablename__ = 'GameConfiguration'
    id = Column('Id', Integer, primary_key=True)
    paytable_index = Column('PaytableIndex', Integer, nullable=False, index=True)
    persistence_id = Column('PersistenceId', Integer, default=0, nullable=False)
    bet_configuration_id = Column('BetConfigurationId', Integer, ForeignKey('BetConfiguration.Id'), nullable=False, index=True)
    total_bet = Column('TotalBet', Integer, nullable=False)
    is_linear = Column('IsLinear', Boolean, default=False, nullable=False)

    bet_configuration = relationship('BetConfiguration', back_populates='game_configurations')
    games = relationship('GameInformation', back_populates='game_configuration', lazy='dynamic')

    def __repr__(self):
        return (f"<GameConfiguration {self.id} (Paytable: {self.paytable_index}, "
                f"TotalBet: {self.total_bet}, Linear: {self.is_linear})>")


class GameInformation(Base):
    __tablename__ = 'Games'
    id = Column('Id', Integer, primary_key=True)
    game_configuration_id = Column('GameConfigurationId', Integer, ForeignKey('GameConfiguration.Id'), nullable=False)
    total_win = Column('TotalWin', BigInteger, default=0, nullable=False)
    game_section_mask = Column('GameSectionMask', Integer, default=0, nullable=False)
    occurrences = Column('Occurrences', Integer, default=1, nullable=False)
    progressive_info = Column('ProgressiveInfo', Text, default='', nullable=False)
    raw_random_numbers = Column('RawRandomNumbers', LargeBinary, nullable=True)

    game_configuration = relationship('GameConfiguration', back_populates='games')

    __table_args__ = (
        Index('ix_games_win_lookup', 'GameConfigurationId', 'TotalWin', 'ProgressiveInfo'),
    )

    def __repr__(self):
        return f"<GameInformation {self.id} (Config: {self.game_configuration_id}, Win: {self.total_win})>"


class GameDataProperty(Base):
    __tablename__ = 'GameData'
    key = Column('Key', String(255), primary_key=True)
    value = Column('Value', Text, nullable=True)

    def __repr__(self):
        return f"<GameDataProperty {self.key}>"
