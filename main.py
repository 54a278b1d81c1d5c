"""
趋势分析 - 主入口文件

读取 config.yaml（或环境变量 TREND_CONFIG_PATH 指定的文件），
启动时构建一次 tokenizer 与情感词典，注入 shared 后运行主Flow。

================================================================================
使用说明
================================================================================

1. 修改 config.yaml 中的 analysis.mode（analyze / compare / drill）
2. 运行 python main.py [config.yaml]
3. 结果写入 data.output_path，图表写入 output.report_dir/images

================================================================================
"""

import logging
import sys
import time
from typing import Any, Dict

from config import (
    config_to_shared,
    load_config,
    resolve_config_path,
    validate_config,
)
from flow import create_main_flow
from utils.nlp.sentiment_lexicon import DEFAULT_LEXICON, load_lexicon
from utils.nlp.tokenizer import build_tokenizer

logger = logging.getLogger(__name__)


def init_shared(config_path: str = "") -> Dict[str, Any]:
    """
    加载并校验配置，构建 shared 字典

    tokenizer 与 lexicon 在此构建一次，之后所有节点复用同一句柄。
    """
    path = resolve_config_path(config_path)
    config = load_config(path)
    validate_config(config)

    shared = config_to_shared(config)
    shared["runtime"] = {
        "tokenizer": build_tokenizer(config.tokenizer.backend),
        "lexicon": load_lexicon(config.lexicon.path) if config.lexicon.path else DEFAULT_LEXICON,
    }
    logger.info("Config loaded from %s (mode=%s)", path, config.analysis.mode)
    return shared


def run(shared: Dict[str, Any]) -> Dict[str, Any]:
    """运行主Flow并返回 shared"""
    flow = create_main_flow()
    start_time = time.time()
    flow.run(shared)
    print(f"[T] 运行时间: {time.time() - start_time:.2f} 秒")
    return shared


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO)
    argv = sys.argv[1:] if argv is None else argv
    config_path = argv[0] if argv else ""

    try:
        shared = init_shared(config_path)
        run(shared)
    except Exception as e:
        logger.error("Analysis failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
