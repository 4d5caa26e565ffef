import logging

from app.constants.languages import is_supported_language, normalize_language, DEFAULT_LANGUAGE, get_language_name
from app.constants.weather import RISK_MESSAGES
from app.exceptions import ClientInputError, ErrorCode
from app.schemas.advisory import TranslateResponse

logger = logging.getLogger(__name__)

# Canned translations of the fixed messages the app itself emits.
PHRASEBOOK = {
    'es': {
        RISK_MESSAGES['low']: 'Las condiciones climáticas son favorables para cultivos sanos.',
        RISK_MESSAGES['medium']: 'Se detectaron condiciones de riesgo moderado. Considere medidas preventivas.',
        RISK_MESSAGES['high']: 'La alta humedad y temperatura favorecen las enfermedades fúngicas. Vigile sus cultivos de cerca.',
        'Your crop appears to be healthy. Continue monitoring for any changes.':
            'Su cultivo parece estar sano. Siga vigilando cualquier cambio.',
    },
    'hi': {
        RISK_MESSAGES['low']: 'मौसम की स्थिति स्वस्थ फसलों के लिए अनुकूल है।',
        RISK_MESSAGES['medium']: 'मध्यम जोखिम की स्थिति पाई गई। निवारक उपायों पर विचार करें।',
        RISK_MESSAGES['high']: 'अधिक नमी और तापमान फफूंद रोगों के लिए अनुकूल हैं। फसलों पर बारीकी से नज़र रखें।',
        'Your crop appears to be healthy. Continue monitoring for any changes.':
            'आपकी फसल स्वस्थ प्रतीत होती है। किसी भी बदलाव पर नज़र रखते रहें।',
    },
}


class TranslationService:
    """
    Translation stub. There is no translation engine behind it: only the
    app's own fixed messages are known, anything else is echoed back with
    translated=False.
    """

    def __init__(self, phrasebook: dict = None):
        self.phrasebook = PHRASEBOOK if phrasebook is None else phrasebook

    def translate(self, text: str, target_lang: str) -> TranslateResponse:
        lang = normalize_language(target_lang)
        if not is_supported_language(lang):
            raise ClientInputError(ErrorCode.UNSUPPORTED_LANGUAGE, language=target_lang)

        if lang == DEFAULT_LANGUAGE:
            return TranslateResponse(translatedText=text, targetLang=lang, translated=False)

        translated = self.phrasebook.get(lang, {}).get(text.strip())
        if translated is None:
            logger.info(f"No {get_language_name(lang)} phrase for text of length {len(text)}; echoing")
            return TranslateResponse(translatedText=text, targetLang=lang, translated=False)
        return TranslateResponse(translatedText=translated, targetLang=lang, translated=True)


translation_service = TranslationService()
