"""
base.py - MonitoredNode 基类

所有流水线节点的基类：记录每个节点的开始、完成、失败与耗时。
"""

import logging
import time

from pocketflow import Node

from utils.monitor import update_status

logger = logging.getLogger(__name__)


class MonitoredNode(Node):
    """
    带执行监控的同步节点

    在 shared["monitor"]["execution_log"] 中记录节点状态；
    异常照常向上抛出，不在此吞掉。
    """

    def _run(self, shared):
        node_name = self.__class__.__name__
        update_status(shared, node_name=node_name, status="running")
        start = time.perf_counter()
        try:
            action = super()._run(shared)
        except Exception as e:
            elapsed = time.perf_counter() - start
            update_status(shared, node_name=node_name, status="failed", elapsed=elapsed, error=str(e))
            logger.error("[%s] failed after %.2fs: %s", node_name, elapsed, e)
            raise
        elapsed = time.perf_counter() - start
        update_status(shared, node_name=node_name, status="completed", elapsed=elapsed)
        logger.debug("[%s] completed in %.2fs", node_name, elapsed)
        return action
