"""Application configuration dataclasses."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Literal
import json


@dataclass
class AppConfig:
    """Settings for the web host. Board size and marks are fixed."""
    title: str = "Tic-Tac-Toe"
    root_id: str = "root"
    host: str = "127.0.0.1"
    port: int = 7000
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    client_dir: str | None = None  # None: the client/ folder beside server/

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "root_id": self.root_id,
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
            "client_dir": self.client_dir,
        }

    @classmethod
    def from_dict(cls, data: dict) -> AppConfig:
        return cls(
            title=data.get("title", "Tic-Tac-Toe"),
            root_id=data.get("root_id", "root"),
            host=data.get("host", "127.0.0.1"),
            port=data.get("port", 7000),
            log_level=data.get("log_level", "INFO"),
            client_dir=data.get("client_dir"),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> AppConfig:
        return cls.from_dict(json.loads(json_str))
