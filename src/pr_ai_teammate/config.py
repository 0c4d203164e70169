"""
Configuration Management

시스템 설정 관리
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List
from pathlib import Path
import logging


logger = logging.getLogger(__name__)


SUPPORTED_LANGUAGES = {'python'}


class ConfigurationError(ValueError):
    """설정 값 오류"""


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(',') if item.strip()]


@dataclass
class RulesConfig:
    """룰 엔진 설정"""
    large_diff_threshold: int = 200  # 0 이하이면 large-diff 룰 비활성화
    todo_markers: List[str] = field(default_factory=lambda: ["TODO", "FIXME"])
    secret_markers: List[str] = field(default_factory=lambda: ["password", "secret", "api_key"])


@dataclass
class AnalysisConfig:
    """정적 분석 설정"""
    max_function_lines: int = 50  # 0 이하이면 function-too-long 검사 비활성화
    languages: List[str] = field(default_factory=lambda: ["python"])


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class AppConfig:
    """전체 애플리케이션 설정"""
    rules: RulesConfig = field(default_factory=RulesConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    debug: bool = False

    @classmethod
    def from_env(cls) -> "AppConfig":
        """환경 변수에서 설정 로드"""
        rules_defaults = RulesConfig()
        analysis_defaults = AnalysisConfig()
        return cls(
            rules=RulesConfig(
                large_diff_threshold=int(os.getenv("LARGE_DIFF_THRESHOLD", "200")),
                todo_markers=_split_list(os.getenv("TODO_MARKERS", ",".join(rules_defaults.todo_markers))),
                secret_markers=_split_list(os.getenv("SECRET_MARKERS", ",".join(rules_defaults.secret_markers))),
            ),
            analysis=AnalysisConfig(
                max_function_lines=int(os.getenv("MAX_FUNCTION_LINES", "50")),
                languages=_split_list(os.getenv("ANALYZER_LANGUAGES", ",".join(analysis_defaults.languages))),
            ),
            logging=LoggingConfig(
                level=os.getenv("LOG_LEVEL", "INFO"),
                format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
                file_path=os.getenv("LOG_FILE"),
                max_file_size=int(os.getenv("LOG_MAX_SIZE", str(10 * 1024 * 1024))),
                backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
            ),
            debug=os.getenv("DEBUG", "false").lower() == "true",
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "AppConfig":
        """YAML 파일에서 설정 로드"""
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> "AppConfig":
        """딕셔너리에서 설정 생성"""
        unknown = set(config_data) - {'rules', 'analysis', 'logging', 'debug'}
        if unknown:
            raise ConfigurationError(f"Unknown configuration section: {', '.join(sorted(unknown))}")

        try:
            return cls(
                rules=RulesConfig(**(config_data.get('rules') or {})),
                analysis=AnalysisConfig(**(config_data.get('analysis') or {})),
                logging=LoggingConfig(**(config_data.get('logging') or {})),
                debug=config_data.get('debug', False),
            )
        except TypeError as e:
            raise ConfigurationError(f"Unknown configuration key: {e}") from e

    def validate(self) -> None:
        """설정 유효성 검사"""
        errors = []

        # 지원하지 않는 분석 언어
        unknown = [lang for lang in self.analysis.languages if lang.lower() not in SUPPORTED_LANGUAGES]
        if unknown:
            errors.append(f"Unsupported analyzer languages: {', '.join(unknown)}")

        # 로그 레벨 검증
        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.logging.level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.logging.level}")

        if errors:
            raise ConfigurationError(f"Configuration validation failed: {'; '.join(errors)}")

        # 0 이하 임계값은 오류가 아니라 해당 검사를 끈다
        if self.rules.large_diff_threshold <= 0:
            logger.info("large-diff rule disabled (non-positive threshold)")
        if self.analysis.max_function_lines <= 0:
            logger.info("function-too-long check disabled (non-positive limit)")

    def to_dict(self) -> Dict[str, Any]:
        """설정을 딕셔너리로 변환"""
        return {
            'rules': {
                'large_diff_threshold': self.rules.large_diff_threshold,
                'todo_markers': list(self.rules.todo_markers),
                'secret_markers': list(self.rules.secret_markers),
            },
            'analysis': {
                'max_function_lines': self.analysis.max_function_lines,
                'languages': list(self.analysis.languages),
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file_path': self.logging.file_path,
                'max_file_size': self.logging.max_file_size,
                'backup_count': self.logging.backup_count,
            },
            'debug': self.debug,
        }


class ConfigManager:
    """설정 관리자"""

    def __init__(self, config: Optional[AppConfig] = None):
        self._config = config or AppConfig.from_env()
        self._config.validate()
        self._setup_logging()

    @property
    def config(self) -> AppConfig:
        """현재 설정 반환"""
        return self._config

    def update_config(self, **kwargs) -> None:
        """설정 업데이트"""
        config_dict = self._config.to_dict()

        for key, value in kwargs.items():
            if '.' in key:
                # 중첩된 설정 (예: 'rules.large_diff_threshold')
                section, name = key.split('.', 1)
                if section not in config_dict or not isinstance(config_dict[section], dict):
                    raise ConfigurationError(f"Unknown configuration section: {section}")
                config_dict[section][name] = value
            else:
                # 최상위 설정
                config_dict[key] = value

        # 새로운 설정 객체 생성
        self._config = AppConfig.from_dict(config_dict)
        self._config.validate()
        self._setup_logging()

    def _setup_logging(self) -> None:
        """로깅 설정"""
        level = 'DEBUG' if self._config.debug else self._config.logging.level.upper()
        logging.basicConfig(
            level=getattr(logging, level),
            format=self._config.logging.format,
        )

        # 파일 로깅이 설정된 경우 로테이션 설정
        if self._config.logging.file_path:
            from logging.handlers import RotatingFileHandler

            handler = RotatingFileHandler(
                self._config.logging.file_path,
                maxBytes=self._config.logging.max_file_size,
                backupCount=self._config.logging.backup_count,
            )
            handler.setFormatter(logging.Formatter(self._config.logging.format))

            # 루트 로거에 핸들러 추가
            root_logger = logging.getLogger()
            root_logger.addHandler(handler)
