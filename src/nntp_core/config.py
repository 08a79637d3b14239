"""
NNTP 响应解码库 - 配置模块

负责配置的加载、解析与强类型转换。
支持从 TOML 文件、环境变量 (.env) 或字典中加载配置。
"""

import codecs
import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NntpConfig:
    """NetworkClient 的强类型配置对象。

    所有字段均为只读 (frozen=True)。

    Attributes:
        host: NNTP 服务器地址。
        port: 服务器端口 (通常为 119)。
        encoding: 响应文本的字符编码。
        timeout: 单行读取与建立连接的超时秒数。
    """

    host: str
    port: int = 119
    encoding: str = "utf-8"
    timeout: float = 30.0

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} "
            f"server={self.host}:{self.port}, "
            f"encoding='{self.encoding}', "
            f"timeout={self.timeout}>"
        )


def create_config_from_dict(raw_data: dict[str, Any]) -> NntpConfig:
    """通用工厂：将字典转换为强类型配置对象。

    Args:
        raw_data: 原始配置字典 (来自 TOML 或 Env)。

    Returns:
        NntpConfig: 验证并转换后的配置对象。

    Raises:
        ConfigError: 当必要字段缺失或格式错误时抛出。
    """
    try:
        host = str(raw_data.get("host", "")).strip()
        if not host:
            raise ConfigError("配置缺失: 缺少必要字段 'host'")

        try:
            port = int(raw_data.get("port", 119))
        except (TypeError, ValueError):
            raise ConfigError(f"端口格式无效: {raw_data.get('port')}")
        if not 0 < port < 65536:
            raise ConfigError(f"端口超出范围: {port}")

        try:
            timeout = float(raw_data.get("timeout", 30.0))
        except (TypeError, ValueError):
            raise ConfigError(f"超时格式无效: {raw_data.get('timeout')}")
        if timeout <= 0:
            raise ConfigError(f"超时必须大于 0: {timeout}")

        encoding = str(raw_data.get("encoding", "utf-8"))
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ConfigError(f"未知编码: {encoding}")

        return NntpConfig(host=host, port=port, encoding=encoding, timeout=timeout)

    except Exception as e:
        if isinstance(e, ConfigError):
            raise
        raise ConfigError(f"配置生成失败: {e}") from e


def load_config_from_toml(file_path: Path, profile: str = "default") -> NntpConfig:
    """从 TOML 文件加载配置。

    查找顺序:
    1. [profile.xxx]: 指定的 profile 块。
    2. [nntp]: 单一配置块。
    3. Root: 根表直接配置。

    Raises:
        ConfigError: 文件读取失败或 Profile 不存在。
    """
    if not file_path.exists():
        raise ConfigError(f"配置文件未找到: {file_path}")

    try:
        with open(file_path, "rb") as f:
            data = tomllib.load(f)
    except Exception as e:
        raise ConfigError(f"读取 TOML 失败: {e}") from e

    raw_config = {}

    if "profile" in data:
        if profile not in data["profile"]:
            raise ConfigError(f"未找到预设: [profile.{profile}]")
        raw_config = data["profile"][profile]
    elif "nntp" in data:
        if profile != "default":
            logger.warning(f"配置仅包含 [nntp] 节，忽略 profile='{profile}'。")
        raw_config = data["nntp"]
    else:
        raw_config = data

    return create_config_from_dict(raw_config)


def load_config_from_env(env_file: Path | None = None) -> NntpConfig:
    """从环境变量加载配置。

    若给出 env_file，先用 python-dotenv 将其载入环境 (覆盖已有变量)。
    读取 `NNTP_HOST`、`NNTP_PORT`、`NNTP_ENCODING`、`NNTP_TIMEOUT`。

    Raises:
        ConfigError: 未检测到任何相关环境变量。
    """
    if env_file is not None:
        if not env_file.exists():
            raise ConfigError(f"配置文件未找到: {env_file}")
        load_dotenv(dotenv_path=env_file, override=True)
        logger.debug(f"已加载配置文件: {env_file}")

    env_map = {
        "host": "HOST",
        "port": "PORT",
        "encoding": "ENCODING",
        "timeout": "TIMEOUT",
    }

    raw_data = {}
    for cfg_key, env_suffix in env_map.items():
        val = os.environ.get(f"NNTP_{env_suffix}")
        if val is not None:
            raw_data[cfg_key] = val

    if not raw_data:
        raise ConfigError("未检测到 NNTP_ 前缀的环境变量")

    return create_config_from_dict(raw_data)
