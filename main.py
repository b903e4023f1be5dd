#!/usr/bin/env python3
"""
DocQA Demo Application

Demonstrates the ingestion and question-answering flow on a couple of
in-memory documents.
"""

import sys

from loguru import logger

from docqa import DocQAConfig, RetrievalService, configure_logging
from docqa.config import settings


SAMPLE_REPORT = """Cancer rates rose sharply across the region during the last decade.
Survival improved significantly thanks to earlier diagnosis and better treatment.
Screening increased access for rural communities. Funding for prevention programs
doubled between the two survey periods. Researchers expect the trend to continue!
"""

SAMPLE_TABLE = """Quarterly screening volume
Region    Q1    Q2    Q3
North     120   135   150
South     98    110   127
Totals were reported by the regional health office.
"""


def main() -> int:
    configure_logging(settings.LOG_LEVEL)
    logger.info("Starting DocQA demo")

    service = RetrievalService.from_config(DocQAConfig.from_settings(settings))

    # 1. Ingestion
    logger.info("--- Phase 1: Ingestion ---")
    report = service.ingest(SAMPLE_REPORT, "report.pdf", confidence=0.92)
    logger.info(f"'{report.name}': {report.status}, {len(report.chunks)} chunks")

    table = service.process_file(SAMPLE_TABLE.encode("utf-8"), "screening.txt", "text/plain")
    logger.info(f"'{table.name}': {table.status}, {len(table.tables)} tables detected")

    # 2. Query
    logger.info("--- Phase 2: Query ---")
    for question in ("What happened to cancer rates?", "How did screening change?"):
        result = service.query(question)
        logger.info(f"Q: {question}")
        print(result.answer)
        print(f"(confidence={result.confidence:.2f}, latency={result.latency_ms:.2f}ms)\n")

    metrics = service.get_metrics()
    logger.info(f"Metrics: {metrics.model_dump()}")

    logger.info("Demo complete!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
