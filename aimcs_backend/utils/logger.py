"""
Logging utilities for the AIMCS gateway

Configures stdlib logging as the sink and structlog as the front end, so
every module logs structured events with structlog.get_logger(__name__).
"""

import logging
import logging.config
import os
import sys
from typing import Any, Dict, Optional

import structlog
import yaml

# Default logging configuration; structlog renders, stdlib only writes lines
DEFAULT_LOGGING_CONFIG: Dict[str, Any] = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'plain': {
            'format': '%(message)s'
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'INFO',
            'formatter': 'plain',
            'stream': 'ext://sys.stdout'
        }
    },
    'root': {
        'level': 'INFO',
        'handlers': ['console']
    },
    'loggers': {
        'uvicorn.access': {
            # Replaced by the gateway's own access log
            'level': 'WARNING'
        }
    }
}


def _load_config_file(config_path: str) -> Optional[Dict[str, Any]]:
    """Load a dictConfig mapping from a YAML file"""
    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        print(f"Failed to load logging config from {config_path}: {e}", file=sys.stderr)
        return None

    if not isinstance(config, dict):
        print(f"Ignoring logging config {config_path}: not a mapping", file=sys.stderr)
        return None
    return config


def _renderer(log_format: str):
    if log_format == 'console':
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def setup_logging(
    log_level: str = 'INFO',
    log_format: str = 'json',
    config_path: Optional[str] = None
) -> None:
    """
    Setup logging configuration

    Args:
        log_level: Level applied to the root logger and console handler
        log_format: 'json' for machine-readable lines, 'console' for local dev
        config_path: Optional YAML file with a logging.config.dictConfig mapping
    """
    config = None
    if config_path and os.path.exists(config_path):
        config = _load_config_file(config_path)

    if not config:
        config = {
            **DEFAULT_LOGGING_CONFIG,
            'handlers': {k: dict(v) for k, v in DEFAULT_LOGGING_CONFIG['handlers'].items()},
            'root': dict(DEFAULT_LOGGING_CONFIG['root']),
        }
        level = log_level.upper()
        config['root']['level'] = level
        for handler_config in config['handlers'].values():
            handler_config['level'] = level

    logging.config.dictConfig(config)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _renderer(log_format),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    """Get a structlog logger bound to the given name"""
    return structlog.get_logger(name)


class RequestLogger:
    """Logger for HTTP requests"""

    def __init__(self, name: str = "aimcs_backend.access"):
        self.logger = structlog.get_logger(name)

    def log_request(
        self,
        method: str,
        path: str,
        status_code: int,
        duration_ms: float,
        client_ip: Optional[str] = None,
        user_agent: Optional[str] = None
    ):
        """Log a completed HTTP request"""
        self.logger.info(
            "request_completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=round(duration_ms, 3),
            client_ip=client_ip,
            user_agent=user_agent,
        )

