from __future__ import annotations

import os
import logging

import dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

class Config(BaseModel):
    tick_interval: float = Field(default=0.01, gt=0.0)  # seconds
    log_level: str = 'INFO'

    model_config = ConfigDict(
        frozen=True,
    )

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'Unknown log level: {v}')
        return level

    @classmethod
    def fromEnv(cls, dotenv_path: str | None = None) -> Config:
        '''
        Reads `.env` first. Real environment variables win.
        '''
        dotenv.load_dotenv(dotenv_path)
        raw = {}
        tick_interval = os.getenv('STOPWATCH_TICK_INTERVAL')
        if tick_interval is not None:
            raw['tick_interval'] = tick_interval
        log_level = os.getenv('STOPWATCH_LOG_LEVEL')
        if log_level is not None:
            raw['log_level'] = log_level
        return cls.model_validate(raw)
