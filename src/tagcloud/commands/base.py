"""커맨드 추상 인터페이스.

각 서브커맨드는 자신의 이름/도움말, 인자 정의, 파싱 결과로부터의 생성 방법,
실행 로직을 한 클래스에 모아 둔다. 서브파서에는 ``command_cls`` 기본값으로
커맨드 클래스가 묶이므로 CLI는 별도의 이름 조회 없이 커맨드를 생성한다.
"""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Protocol

from rich.console import Console

from tagcloud.parser import CliHelpFormatter


class SubparsersLike(Protocol):
    """argparse 서브파서 액션 호환 프로토콜."""

    def add_parser(self, name: str, **kwargs: Any) -> argparse.ArgumentParser:
        ...


class Command(ABC):
    """서브커맨드 실행 인터페이스.

    Attributes:
        name: 서브커맨드 이름
        help: 서브커맨드 도움말
    """

    name: ClassVar[str]
    help: ClassVar[str]

    @classmethod
    def configure_parser(cls, subparsers: SubparsersLike) -> argparse.ArgumentParser:
        """서브파서를 등록하고 커맨드 클래스를 기본값으로 묶는다."""
        parser = subparsers.add_parser(cls.name, help=cls.help, formatter_class=CliHelpFormatter)
        cls.add_arguments(parser)
        parser.set_defaults(command_cls=cls)
        return parser

    @staticmethod
    @abstractmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        """서브커맨드 고유 인자를 추가한다."""

    @classmethod
    @abstractmethod
    def from_args(cls, console: Console, args: argparse.Namespace) -> Command:
        """파싱된 인자로 커맨드를 생성한다."""

    @abstractmethod
    def execute(self) -> dict[str, Any]:
        """커맨드 실행 로직.

        Returns:
            실행 결과 딕셔너리 (요약 테이블 출력용)
        """

    def get_name(self) -> str:
        return self.name
