import logging
from typing import Callable, Dict, Any, Awaitable
from aiogram import BaseMiddleware
from aiogram.types import Message, CallbackQuery, TelegramObject

from app.domain.enums import ErrorKind
from app.domain.exceptions import NetWorthError

logger = logging.getLogger(__name__)

GENERIC_ERROR = "⚠️ <b>Something went wrong.</b>\n\nPlease try again later."

ERROR_MESSAGES = {
    ErrorKind.INPUT: "❌ <b>That doesn't look like a wallet address.</b>\n\nSend an address like <code>0x1234...</code>",
    ErrorKind.ORACLE: "⚠️ <b>Couldn't fetch the wallet balance.</b>\n\nCheck the address and try again in a moment.",
    ErrorKind.STORE: "⚠️ <b>Couldn't save your result.</b>\n\nPlease try again later.",
    ErrorKind.CACHE: GENERIC_ERROR,
}

def describe_error(error: Exception) -> str:
    if isinstance(error, NetWorthError):
        return ERROR_MESSAGES.get(error.kind, GENERIC_ERROR)
    return GENERIC_ERROR

class ErrorHandlingMiddleware(BaseMiddleware):
    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any]
    ) -> Any:
        try:
            return await handler(event, data)
        except NetWorthError as e:
            logger.warning(f"Request failed ({e.kind}): {e}")
            await self._reply(event, describe_error(e))
        except Exception as e:
            logger.error(f"Unhandled exception in middleware: {e}", exc_info=True)
            await self._reply(event, describe_error(e))
        return None

    async def _reply(self, event: TelegramObject, text: str) -> None:
        try:
            if isinstance(event, Message):
                await event.answer(text, parse_mode="HTML")
            elif isinstance(event, CallbackQuery):
                await event.message.answer(text, parse_mode="HTML")
                await event.answer()
        except Exception as send_err:
            logger.error(f"Failed to send error message to user: {send_err}")
