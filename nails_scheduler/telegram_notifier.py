import logging

import requests

from nails_scheduler import config

logger = logging.getLogger(__name__)


def send_telegram_message(message: str, silent: bool = False):
    """Sends a message to the configured Telegram chat. Silent messages arrive without a sound."""
    token = config.TELEGRAM_BOT_TOKEN
    chat_id = config.TELEGRAM_CHAT_ID

    if not token or not chat_id:
        logger.debug("Telegram configuration missing. Skipping notification.")
        return

    url = f"https://api.telegram.org/bot{token}/sendMessage"
    payload = {
        "chat_id": chat_id,
        "text": message,
        "parse_mode": "Markdown",
        "disable_notification": silent,
    }

    try:
        response = requests.post(url, json=payload, timeout=10)
        response.raise_for_status()
        logger.info("Telegram notification sent successfully.")
    except requests.exceptions.RequestException as e:
        logger.error(f"Failed to send Telegram message: {e}")


def format_booking_message(appointment) -> str:
    message = f"💅 *New appointment* {appointment.date} {appointment.time} ({appointment.duration} min)\n{appointment.client_name}"
    if appointment.notes:
        message += f"\n_{appointment.notes}_"
    return message


def format_cancellation_message(appointment) -> str:
    return f"❌ *Appointment cancelled* {appointment.date} {appointment.time}\n{appointment.client_name}"
