# i18n.py
import locale

MESSAGES = {
    "en": {
        "range_not_a_number": "Please enter valid numbers for video range",
        "range_below_one": "Video numbers must be greater than 0",
        "range_exceeds_total": "Video numbers cannot exceed {total}",
        "range_start_after_end": "From video number must be less than or equal to To video number",
        "range_empty": "Invalid video range",
        "help_playlist": "URL or ID of the YouTube playlist.",
        "help_from": "First video of the range (1-based).",
        "help_to": "Last video of the range (inclusive).",
        "help_api_key": "YouTube Data API key (defaults to $YOUTUBE_API_KEY).",
        "help_config": "YAML configuration file.",
        "help_days": "Show days in durations longer than 24 hours.",
        "help_lang": "Set the language for output messages (e.g., 'en' or 'fr').",
        "help_quiet": "Only log warnings and errors.",
        "fetching_playlist": "Fetching playlist '{playlist_id}'...",
        "playlist_title": "Playlist: {title}",
        "playlist_channel": "Channel: {channel}",
        "video_count": "Videos counted: {count} of {total}",
        "video_range": "Range: videos {start}-{end}",
        "video_range_all": "Range: all videos",
        "total_duration": "Total duration: {duration}",
        "average_duration": "Average per video: {duration}",
        "first_video": "First video: #{position} {title} ({url})",
        "last_video": "Last video: #{position} {title} ({url})",
        "no_videos": "No videos to show.",
        "speed_duration": "At {speed}x speed: {duration}",
        "playlist_id": "Playlist ID: {playlist_id}",
        "error": "Error",
    },
    "fr": {
        "range_not_a_number": "Veuillez saisir des numéros de vidéo valides",
        "range_below_one": "Les numéros de vidéo doivent être supérieurs à 0",
        "range_exceeds_total": "Les numéros de vidéo ne peuvent pas dépasser {total}",
        "range_start_after_end": "Le numéro de la première vidéo doit être inférieur ou égal à celui de la dernière",
        "range_empty": "Plage de vidéos invalide",
        "help_playlist": "URL ou ID de la playlist YouTube.",
        "help_from": "Première vidéo de la plage (à partir de 1).",
        "help_to": "Dernière vidéo de la plage (incluse).",
        "help_api_key": "Clé de l'API YouTube Data (par défaut $YOUTUBE_API_KEY).",
        "help_config": "Fichier de configuration YAML.",
        "help_days": "Afficher les jours pour les durées de plus de 24 heures.",
        "help_lang": "Définit la langue des messages de sortie (ex: 'en' ou 'fr').",
        "help_quiet": "N'afficher que les avertissements et les erreurs.",
        "fetching_playlist": "Récupération de la playlist '{playlist_id}'...",
        "playlist_title": "Playlist : {title}",
        "playlist_channel": "Chaîne : {channel}",
        "video_count": "Vidéos comptées : {count} sur {total}",
        "video_range": "Plage : vidéos {start}-{end}",
        "video_range_all": "Plage : toutes les vidéos",
        "total_duration": "Durée totale : {duration}",
        "average_duration": "Moyenne par vidéo : {duration}",
        "first_video": "Première vidéo : #{position} {title} ({url})",
        "last_video": "Dernière vidéo : #{position} {title} ({url})",
        "no_videos": "Aucune vidéo à afficher.",
        "speed_duration": "En vitesse {speed}x : {duration}",
        "playlist_id": "ID de la playlist : {playlist_id}",
        "error": "Erreur",
    },
}

_current_lang = "en"


def get_default_lang():
    try:
        lang_code, _ = locale.getlocale()
        return "fr" if lang_code and lang_code.startswith("fr") else "en"
    except (ValueError, TypeError):
        return "en"


def set_lang(lang: str):
    global _current_lang
    _current_lang = lang if lang in MESSAGES else "en"


def get_message(key, **kwargs):
    lang = _current_lang
    if lang not in MESSAGES or key not in MESSAGES[lang]:
        # Fallback to English if key not found in current language
        lang = "en"

    message_template = MESSAGES[lang].get(key, f"Translation missing for key: {key}")

    try:
        return message_template.format(**kwargs)
    except KeyError as e:
        # This can happen if a placeholder is missing in kwargs
        return f"Formatting error for key '{key}': missing placeholder {e}"


# Initialize with default system language
set_lang(get_default_lang())
