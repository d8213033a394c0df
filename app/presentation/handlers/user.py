from aiogram import Router, F
from aiogram.filters import Command, CommandObject, CommandStart
from aiogram.fsm.context import FSMContext
from aiogram.types import Message

from app.config.settings import settings
from app.presentation.keyboards.main import CANCEL, CHECK_NET_WORTH, LEADERBOARD, cancel_kb, main_menu_kb
from app.presentation.states import NetWorthSG
from app.use_cases.leaderboard import LeaderboardService
from app.use_cases.user_state import UserStateService
from app.utils.formatters import format_leaderboard, format_net_worth

router = Router()

async def reply_net_worth(
    message: Message,
    address: str,
    user_state: UserStateService,
    leaderboard: LeaderboardService
):
    result = await user_state.update(address)
    rank = await leaderboard.get_user_rank(result.address)
    await message.answer(format_net_worth(result, rank), parse_mode="HTML", reply_markup=main_menu_kb())

@router.message(CommandStart())
async def cmd_start(message: Message, state: FSMContext):
    await state.clear()
    text = (
        "👋 <b>Welcome to the Net Worth leaderboard!</b>\n\n"
        "Send your wallet address to see your net worth. "
        "Every visit raises your multiplier, so come back often.\n\n"
        "You can also use /networth <code>0x...</code> and /leaderboard."
    )
    await message.answer(text, parse_mode="HTML", reply_markup=main_menu_kb())

@router.message(Command("leaderboard"))
@router.message(F.text == LEADERBOARD)
async def show_leaderboard(message: Message, leaderboard: LeaderboardService):
    top = await leaderboard.get_top(limit=settings.LEADERBOARD_LIMIT)
    await message.answer(format_leaderboard(top), parse_mode="HTML")

@router.message(Command("networth"))
async def cmd_net_worth(
    message: Message,
    command: CommandObject,
    state: FSMContext,
    user_state: UserStateService,
    leaderboard: LeaderboardService
):
    if not command.args:
        await state.set_state(NetWorthSG.wait_address)
        await message.answer("Send your wallet address:", reply_markup=cancel_kb())
        return
    await state.clear()
    await reply_net_worth(message, command.args.strip(), user_state, leaderboard)

@router.message(F.text == CHECK_NET_WORTH)
async def ask_address(message: Message, state: FSMContext):
    await state.set_state(NetWorthSG.wait_address)
    await message.answer("Send your wallet address:", reply_markup=cancel_kb())

@router.message(NetWorthSG.wait_address, F.text == CANCEL)
async def cancel_address(message: Message, state: FSMContext):
    await state.clear()
    await message.answer("Cancelled.", reply_markup=main_menu_kb())

@router.message(NetWorthSG.wait_address, F.text)
async def on_address(
    message: Message,
    state: FSMContext,
    user_state: UserStateService,
    leaderboard: LeaderboardService
):
    await state.clear()
    await reply_net_worth(message, message.text, user_state, leaderboard)
