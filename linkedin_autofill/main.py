#!/usr/bin/env python3
"""
LinkedIn Easy Apply Autofill - Main Orchestration
"""

import argparse
import os
import sys

import linkedin_autofill.config as config
from linkedin_autofill.browser.session import launch_browser
from linkedin_autofill.data.knowledge import KnowledgeError, load_knowledge, load_profile
from linkedin_autofill.debug.question_logger import QuestionLogger
from linkedin_autofill.navigation.jobs import process_job_listings
from linkedin_autofill.recovery.failure_handler import FailureHandler
from linkedin_autofill.recovery.policy import POLICIES, build_policy
from linkedin_autofill.state.stepper import FormStepper


def build_parser():
    parser = argparse.ArgumentParser(
        description="LinkedIn Easy Apply Autofill - fill and submit Easy Apply forms from a knowledge base",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Speed Modes:
  --speed dev       40-50%% faster - balanced testing
  --speed super     70-80%% faster - maximum safe speed
  (default)         Production speed - safest, most human-like

Knowledge directory (--knowledge-dir) holds:
  questions.json, duration_questions.json, keywords.json, profile.json

Examples:
  python -m linkedin_autofill.main
  python -m linkedin_autofill.main --speed dev --max-pages 3
  python -m linkedin_autofill.main --recovery operator --review-policy stop
        """,
    )
    parser.add_argument("--speed", choices=["dev", "super"], help="Speed mode: dev or super")
    parser.add_argument(
        "--knowledge-dir",
        default=config.KNOWLEDGE_DIR,
        help=f"Directory with knowledge tables (default: {config.KNOWLEDGE_DIR})",
    )
    parser.add_argument(
        "--review-policy",
        choices=["advance", "stop"],
        default=config.REVIEW_POLICY,
        help="Treat a lone Review control as Next (advance) or as the end of the form (stop)",
    )
    parser.add_argument(
        "--recovery",
        choices=sorted(POLICIES),
        default=config.RECOVERY_POLICY,
        help="After a validation failure: continue, wait for operator, or abort the batch",
    )
    parser.add_argument("--max-pages", type=int, default=1, help="Result pages to process (default: 1)")
    parser.add_argument("--question-log", default=config.QUESTION_LOG_PATH, help="Unanswered question log (JSONL)")
    parser.add_argument("--failure-log", default=config.FAILURE_LOG_PATH, help="Validation failure log (JSONL)")
    parser.add_argument("--result-log", default=config.RESULT_LOG_PATH, help="Per-job result log (JSONL)")
    return parser


def configure_speed(speed):
    config.DEV_TEST_SPEED = speed == "dev"
    config.SUPER_DEV_SPEED = speed == "super"
    # Rebuild TIMING dict after config changes
    config.TIMING = config.get_active_timing()
    if speed:
        print(f"⚡ Speed mode: {speed}\n")


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_speed(args.speed)

    try:
        tables = load_knowledge(args.knowledge_dir)
        profile = load_profile(os.path.join(args.knowledge_dir, "profile.json"))
    except KnowledgeError as e:
        print(f"❌ {e}")
        return 1

    policy = build_policy(args.recovery)

    playwright, context, driver = launch_browser()
    try:
        stepper = FormStepper(
            driver,
            tables,
            question_logger=QuestionLogger(args.question_log),
            failure_handler=FailureHandler(args.failure_log, policy),
            review_policy=args.review_policy,
        )

        print("\nLog in (if needed) and navigate to an Easy Apply job search page.")
        input("Press Enter here to start automation...")

        summary = process_job_listings(
            driver, stepper, profile, policy, max_pages=args.max_pages, result_log=args.result_log
        )

        print("\n" + "=" * 60)
        print("RUN SUMMARY")
        print("=" * 60)
        for status, count in sorted(summary.items()):
            print(f"  {status}: {count}")
    except KeyboardInterrupt:
        print("\n⏹️  Interrupted")
    finally:
        context.close()
        playwright.stop()

    return 0


if __name__ == "__main__":
    sys.exit(main())
