# example.py
"""
这是一个 nntp-core API 的最小示例。

它演示了如何连接 NNTP 服务器、读取 CAPABILITIES 多行响应，
并在发送下一条命令之前读完正文。

运行此示例：
1. 在根目录创建 .env 文件，至少包含 NNTP_HOST=news.example.com
2. 安装依赖： pip install -e .
3. 从项目根目录运行： python example.py
"""

import asyncio
import logging
import sys
from pathlib import Path

from nntp_core import NetworkClient, NntpError, load_config_from_env

# 日志配置开始
logging.basicConfig(
    level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("NntpExample")
# 日志配置结束


async def main() -> int:
    env_path = Path.cwd() / ".env"
    try:
        config = load_config_from_env(env_path if env_path.exists() else None)
    except NntpError as e:
        logger.critical(f"启动失败: {e}")
        return 1

    logger.info(f"使用配置: {config!r}")
    try:
        async with NetworkClient(config) as client:
            response = await client.send("CAPABILITIES")
            logger.info(f"{response.status} {response.status_text}")
            # 必须读完多行正文，才能继续在同一连接上发送命令
            async for line in response.body:
                print(line, end="")

            response = await client.send("QUIT")
            logger.info(f"{response.status} {response.status_text}")
    except NntpError as e:
        logger.error(f"会话异常: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
