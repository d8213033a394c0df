from aiogram.types import ReplyKeyboardMarkup, KeyboardButton

CHECK_NET_WORTH = "💰 Check net worth"
LEADERBOARD = "📊 Leaderboard"
CANCEL = "⬅️ Cancel"

def main_menu_kb() -> ReplyKeyboardMarkup:
    return ReplyKeyboardMarkup(keyboard=[
        [KeyboardButton(text=CHECK_NET_WORTH), KeyboardButton(text=LEADERBOARD)]
    ], resize_keyboard=True)

def cancel_kb() -> ReplyKeyboardMarkup:
    return ReplyKeyboardMarkup(keyboard=[[KeyboardButton(text=CANCEL)]], resize_keyboard=True)
