"""Command line entry point for the quiz state layer"""
import argparse
import json
import logging
import os
import sys
import time
import traceback
from typing import List, Optional

from pydantic import ValidationError

from quiz_state.config import settings
from quiz_state.db import db
from quiz_state.errors import QuizStateError
from quiz_state.models.payload import CreateQuizPayload
from quiz_state.models.quiz import InvocationContext
from quiz_state.services.quiz import QuizService
from quiz_state.utils.json_encoder import DomainEncoder, quiz_to_dict

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='quiz_state', description='Quiz state layer operations')
    parser.add_argument('--database-url', default=None, help='SQLAlchemy database URL (defaults to DATABASE_URL)')
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('init', help='Initialize platform configuration')

    create = subparsers.add_parser('create', help='Create a quiz from a JSON payload')
    create.add_argument('--caller', required=True, help='Invoking actor identifier')
    create.add_argument('--input', required=True, help='Path to the CreateQuizPayload JSON file')

    stats = subparsers.add_parser('stats', help='Show creator stats')
    stats.add_argument('--creator', required=True, help='Creator actor identifier')

    return parser

def _create(service: QuizService, caller: str, input_path: str) -> dict:
    with open(input_path, 'r') as f:
        payload = CreateQuizPayload.model_validate(json.load(f))

    context = InvocationContext(caller=caller, timestamp=int(time.time()))
    quiz = service.create_quiz(
        context,
        payload.quiz_details.to_domain(),
        payload.questions,
        payload.reward_settings.to_domain(),
        payload.default_duration,
        payload.default_max_points,
        payload.custom_timing,
        payload.creator
    )
    result = quiz_to_dict(quiz)

    if settings.OUTPUT_DIR:
        output_path = os.path.join(settings.OUTPUT_DIR, f"quiz_{quiz.id}.json")
        with open(output_path, 'w') as f:
            json.dump(result, f, indent=2)
        logger.info(f"Wrote {output_path}")
    return result

def run(argv: Optional[List[str]] = None) -> int:
    """Run one command and return the process exit code"""
    args = build_parser().parse_args(argv)
    try:
        db.init(args.database_url)
        service = QuizService(db, settings)

        if args.command == 'init':
            result = {'initialized': service.initialize_platform()}
        elif args.command == 'create':
            result = _create(service, args.caller, args.input)
        else:
            result = service.get_creator_stats(args.creator)

        print(json.dumps(result, indent=2, cls=DomainEncoder))
        return 0

    except QuizStateError as e:
        print(json.dumps(e.to_dict(), indent=2))
        return 1
    except (ValidationError, OSError, json.JSONDecodeError) as e:
        logger.error(f"Invalid input: {e}")
        return 1
    except Exception as e:
        logger.error(f"Error running {args.command}: {e}")
        traceback.print_exc()
        return 1
    finally:
        db.dispose()

def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL, format='%(message)s')
    sys.exit(run())

if __name__ == "__main__":
    main()
