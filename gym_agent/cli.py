"""
Interactive console for the shop agent.

Usage:
    gym-agent-cli
    # OR
    python -m gym_agent.cli

Type 'bye' to exit. The whole session shares one conversation thread.
"""

import asyncio
import uuid
from typing import Callable, Optional

from loguru import logger

from gym_agent.agents.shop import ShopAgent
from gym_agent.config.settings import settings
from gym_agent.memory.conversation_store import ConversationStore
from gym_agent.utils.logger import setup_logger

EXIT_COMMAND = "bye"


async def run_cli(
    agent: ShopAgent,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    thread_id: Optional[str] = None,
) -> int:
    """
    Read-eval-print loop over one thread.

    Returns the number of turns answered. A failed turn is reported and the
    loop continues.
    """
    thread_id = thread_id or f"cli-{uuid.uuid4()}"
    turns = 0

    write(f"🚀 {settings.system_name} Gym Product Agent (type '{EXIT_COMMAND}' to exit)")
    write("Try: 'what products', 'functional trainer', 'treadmill', 'Multi-Station'\n")

    while True:
        try:
            user_input = await asyncio.to_thread(read_line, "You: ")
        except (EOFError, KeyboardInterrupt):
            write("\nGoodbye!")
            break

        user_input = user_input.strip()
        if user_input.lower() == EXIT_COMMAND:
            write("Goodbye!")
            break
        if not user_input:
            continue

        try:
            answer = await agent.achat(user_input, thread_id)
        except Exception as e:
            logger.error(f"Turn failed: {e}")
            write(f"❌ Error: {e}")
            continue

        turns += 1
        write("\n🤖 Agent:")
        write(answer or "Processing...")
        write("")

    return turns


async def _main():
    store = ConversationStore()
    await store.async_init()
    try:
        agent = ShopAgent(store=store)
        await run_cli(agent)
    finally:
        await store.close()


def main():
    """Console script entry point"""
    setup_logger()
    asyncio.run(_main())


if __name__ == "__main__":
    main()
