"""Canned chat replies"""
import random

CHAT_RESPONSES = [
    "Indeed, that is a most intriguing thought!",
    "Pray tell, would you like me to elaborate on that matter?",
    "A splendid observation, if I may say so myself.",
    "How fascinating! The pursuit of knowledge is truly noble.",
    "I find your inquiry most stimulating, dear friend.",
    "Capital! That reminds me of an old proverb...",
    "Your words carry wisdom beyond measure.",
    "Allow me to ponder upon this matter with great care.",
    "Excellent question! The answer lies in careful contemplation.",
    "How delightful to engage in such scholarly discourse!",
]


def pick_response(rng: random.Random) -> str:
    """One canned reply, chosen uniformly"""
    return rng.choice(CHAT_RESPONSES)
