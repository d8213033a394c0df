from aiogram.fsm.state import StatesGroup, State

class NetWorthSG(StatesGroup):
    wait_address = State()
