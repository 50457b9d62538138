"""
Tumblr Blog Client

This is the command line entry point for the Tumblr blog client.
It reads, creates, edits and deletes posts on the configured blog
and prints the API payload as JSON.
"""

import sys
import json
import asyncio
import argparse
import logging
from typing import Optional, List, Any

from config import settings
from config.validators import validate_settings, get_config_summary
from utils.logger import get_logger, setup_file_logging
from utils.exceptions import (
    TumblrClientError, ConfigurationError, ConstructionError, RemoteError
)
from services.blog_service import BlogService
from services.params import DeletePostParams, EditPostParams, PostsQuery, TextPostParams
from services.remote_client import Credentials
from services.stream import Single

# Set up logging
logger = get_logger(__name__)

POST_TYPES = ["text", "photo", "quote", "link", "chat", "audio", "video"]
POST_STATES = ["published", "draft", "queue", "private"]


def build_operation(service: BlogService, args: argparse.Namespace) -> Single[Any]:
    """
    Map the parsed command onto a BlogService operation.

    Args:
        service: The service bound to the target blog
        args: Parsed command line arguments

    Returns:
        Single: The cold stream for the requested operation.
    """
    if args.command == "info":
        return service.blog_info()
    if args.command == "avatar":
        return service.blog_avatar(args.size)
    if args.command == "posts":
        return service.blog_posts(args.type, PostsQuery(tag=args.tag, limit=args.limit, offset=args.offset))
    if args.command == "post":
        return service.blog_post(args.type, PostsQuery(tag=args.tag))
    if args.command == "text":
        return service.create_text_post(TextPostParams(
            body=args.body,
            title=args.title,
            tags=args.tags,
            state=args.state,
            format=args.format,
            slug=args.slug,
        ))
    if args.command == "edit":
        return service.edit_post(EditPostParams(
            id=args.id,
            title=args.title,
            body=args.body,
            tags=args.tags,
            state=args.state,
        ))
    if args.command == "delete":
        return service.delete_post(DeletePostParams(id=args.id))
    raise ValueError(f"Unknown command: {args.command}")


async def run_command(service: BlogService, args: argparse.Namespace) -> Any:
    """Run one command against the service and return its payload."""
    return await build_operation(service, args)


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Tumblr Blog Client')
    parser.add_argument('--blog', type=str, default=None,
                        help='Blog name or hostname (defaults to TUMBLR_BLOG_IDENTIFIER)')
    parser.add_argument('--log-file', type=str, default=None, help='Log file path')
    parser.add_argument('--log-level', type=str, choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        default=None, help='Logging level')

    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('info', help='Show blog information')

    avatar = subparsers.add_parser('avatar', help='Show the blog avatar URL')
    avatar.add_argument('--size', type=int, choices=settings.VALID_AVATAR_SIZES, default=None)

    posts = subparsers.add_parser('posts', help='List posts')
    posts.add_argument('--type', choices=POST_TYPES, default=None)
    posts.add_argument('--tag', type=str, default=None)
    posts.add_argument('--limit', type=int, default=None,
                       help=f'Number of posts (1-{settings.MAX_POSTS_LIMIT})')
    posts.add_argument('--offset', type=int, default=None)

    post = subparsers.add_parser('post', help='Show the most recent post')
    post.add_argument('--type', choices=POST_TYPES, default=None)
    post.add_argument('--tag', type=str, default=None)

    text = subparsers.add_parser('text', help='Create a text post')
    text.add_argument('--body', type=str, required=True)
    text.add_argument('--title', type=str, default=None)
    text.add_argument('--tags', type=str, default=None, help='Comma-separated tags')
    text.add_argument('--state', choices=POST_STATES, default=None)
    text.add_argument('--format', choices=['html', 'markdown'], default=None)
    text.add_argument('--slug', type=str, default=None)

    edit = subparsers.add_parser('edit', help='Edit a post')
    edit.add_argument('--id', type=int, required=True)
    edit.add_argument('--title', type=str, default=None)
    edit.add_argument('--body', type=str, default=None)
    edit.add_argument('--tags', type=str, default=None, help='Comma-separated tags')
    edit.add_argument('--state', choices=POST_STATES, default=None)

    delete = subparsers.add_parser('delete', help='Delete a post')
    delete.add_argument('--id', type=int, required=True)

    args = parser.parse_args(argv)
    if args.command == 'posts' and args.limit is not None and not 1 <= args.limit <= settings.MAX_POSTS_LIMIT:
        parser.error(f"--limit must be between 1 and {settings.MAX_POSTS_LIMIT}")
    return args


def main(argv: Optional[List[str]] = None):
    """Main entry point for the application."""
    # Parse command line arguments
    args = parse_arguments(argv)

    # Set up logging
    log_level = getattr(logging, args.log_level or settings.LOG_LEVEL, logging.INFO)
    setup_file_logging(args.log_file or settings.LOG_FILE, log_level)

    blog = args.blog or settings.TUMBLR_BLOG_IDENTIFIER
    logger.info(f"Running '{args.command}' against {blog}")

    try:
        validate_settings(require_blog_identifier=not args.blog)
        logger.debug(f"Configuration: {get_config_summary()}")

        service = BlogService(blog, Credentials.from_settings())
        payload = asyncio.run(run_command(service, args))

        print(json.dumps(payload, indent=2, ensure_ascii=False, default=str))
        exit_code = 0

    except (ConfigurationError, ConstructionError) as e:
        logger.error(f"Configuration error: {e}")
        exit_code = 2
    except RemoteError as e:
        logger.error(f"Tumblr API error: {e}")
        exit_code = 1
    except TumblrClientError as e:
        logger.error(f"Tumblr client error: {e}", exc_info=True)
        exit_code = 1

    # Log application end
    logger.info(f"Tumblr client finished with exit code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
