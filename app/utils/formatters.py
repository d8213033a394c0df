from decimal import Decimal
from typing import List

from app.domain.schemas import LeaderboardEntry, NetWorth

def format_eth(amount: Decimal, places: int = 4) -> str:
    """
    Rounds an ether amount for display and drops trailing zeros.

    2.50000 -> 2.5
    0.00001 -> 0
    """
    quantum = Decimal(1).scaleb(-places)
    rounded = amount.quantize(quantum).normalize()
    if rounded == 0:
        return "0"
    return f"{rounded:f}"

def format_net_worth(result: NetWorth, rank: int) -> str:
    text = (
        f"👤 <b>{result.display_name}</b>\n\n"
        f"💰 Net worth: <b>{format_eth(result.score)} ETH</b>\n"
        f"🔁 Multiplier: <b>x{result.visit_multiplier}</b>"
    )
    if rank:
        text += f"\n🏆 Rank: <b>#{rank}</b>"
    return text

def format_leaderboard(entries: List[LeaderboardEntry]) -> str:
    if not entries:
        return "🏆 <b>Leaderboard is empty.</b>\n\nBe the first: send your wallet address!"

    lines = ["🏆 <b>Top wallets:</b>\n"]
    for idx, entry in enumerate(entries, 1):
        lines.append(f"{idx}. {entry.display_name} — {format_eth(entry.score)} ETH (x{entry.visit_multiplier})")
    return "\n".join(lines)
