"""Check which configured models answer. Use: python run_model_check.py"""
import asyncio
import sys

from resume_intake_ai.agents.extractor_agent import probe_models
from resume_intake_ai.config import ExtractionConfig


def main() -> int:
    config = ExtractionConfig.from_env()
    print(f"Testing {len(config.model_candidates)} models...\n")
    report = asyncio.run(probe_models(config))

    print("RESULTS")
    print("=" * 50)
    if report.working:
        print("Working models:")
        for model in report.working:
            print(f"   - {model}")
    else:
        print("No working models found!")
    if report.failed:
        print("\nFailed models:")
        for failure in report.failed:
            print(f"   - {failure.model}: {failure.error[:100]}")

    print("\nRECOMMENDATIONS:")
    if not report.working:
        print("1. Verify OPENAI_API_KEY is correct and has access to the listed models")
        print("2. Check MODEL_CANDIDATES for typos or retired model ids")
        return 1
    print(f"1. The first working model is {report.working[0]}")
    print("2. Put working models first in MODEL_CANDIDATES")
    return 0


if __name__ == "__main__":
    sys.exit(main())
