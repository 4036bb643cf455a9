"""Fallback Data — static localized responses served when the model is unavailable.

Invariants:
    - One complete template per Language for each endpoint
    - Unknown language codes get the English template
    - Only {weeks} and {days} placeholders are interpolated; every other field is fixed
    - Tables are read-only (MappingProxyType + tuples); callers get fresh dicts

Design Decisions:
    - Literal data, not generated: translations were authored by hand
    - get_fallback_* never raise and take no IO — this is the availability floor
"""

from types import MappingProxyType
from typing import Any

from prenatal_api.core.domain_types import Language, format_count, resolve_language


# --- Baby development --------------------------------------------------------

_DEVELOPMENT_FALLBACK = MappingProxyType({
    Language.EN: MappingProxyType({
        "icon": "👶",
        "title": "Week {weeks}: Baby Development",
        "description": (
            "At {weeks} weeks and {days} days, your baby is growing and "
            "developing rapidly. Each week brings new milestones!"
        ),
        "length": "Varies",
        "weight": "Varies",
        "comparison": "🤱 Growing strong",
        "developments": (
            "Organs are developing and maturing",
            "Brain is forming neural connections",
            "Baby is active and growing",
            "Preparing for life outside the womb",
        ),
    }),
    Language.HI: MappingProxyType({
        "icon": "👶",
        "title": "सप्ताह {weeks}: बच्चे का विकास",
        "description": (
            "{weeks} सप्ताह और {days} दिन पर, आपका बच्चा तेजी से बढ़ रहा है और "
            "विकसित हो रहा है। प्रत्येक सप्ताह नए मील के पत्थर लाता है!"
        ),
        "length": "भिन्न होता है",
        "weight": "भिन्न होता है",
        "comparison": "🤱 मजबूत हो रहा है",
        "developments": (
            "अंग विकसित और परिपक्व हो रहे हैं",
            "मस्तिष्क तंत्रिका कनेक्शन बना रहा है",
            "बच्चा सक्रिय है और बढ़ रहा है",
            "गर्भ के बाहर जीवन के लिए तैयारी कर रहा है",
        ),
    }),
    Language.AR: MappingProxyType({
        "icon": "👶",
        "title": "الأسبوع {weeks}: نمو الطفل",
        "description": (
            "في {weeks} أسبوعًا و {days} أيام، ينمو طفلك ويتطور بسرعة. "
            "كل أسبوع يجلب معالم جديدة!"
        ),
        "length": "يختلف",
        "weight": "يختلف",
        "comparison": "🤱 ينمو بقوة",
        "developments": (
            "الأعضاء تتطور وتنضج",
            "الدماغ يشكل الروابط العصبية",
            "الطفل نشط وينمو",
            "يستعد للحياة خارج الرحم",
        ),
    }),
    Language.UR: MappingProxyType({
        "icon": "👶",
        "title": "ہفتہ {weeks}: بچے کی نشوونما",
        "description": (
            "{weeks} ہفتے اور {days} دن پر، آپ کا بچہ تیزی سے بڑھ رہا ہے اور "
            "ترقی کر رہا ہے۔ ہر ہفتہ نئے سنگ میل لاتا ہے!"
        ),
        "length": "مختلف ہوتا ہے",
        "weight": "مختلف ہوتا ہے",
        "comparison": "🤱 مضبوط ہو رہا ہے",
        "developments": (
            "اعضاء ترقی اور پختہ ہو رہے ہیں",
            "دماغ اعصابی روابط بنا رہا ہے",
            "بچہ فعال ہے اور بڑھ رہا ہے",
            "رحم سے باہر زندگی کے لیے تیاری کر رہا ہے",
        ),
    }),
})


# --- Exercise recommendations ------------------------------------------------

_EXERCISE_FALLBACK = MappingProxyType({
    Language.EN: MappingProxyType({
        "intro": (
            "At {weeks} weeks, gentle exercise is beneficial for both you and "
            "your baby. Here are some safe activities recommended for this "
            "stage of pregnancy."
        ),
        "exercises": (
            MappingProxyType({
                "name": "Walking",
                "emoji": "🚶‍♀️",
                "description": "Walk at a comfortable pace for 20-30 minutes daily.",
                "benefits": "Improves circulation, maintains fitness, and is safe throughout pregnancy.",
            }),
            MappingProxyType({
                "name": "Prenatal Yoga",
                "emoji": "🧘‍♀️",
                "description": "Gentle stretches and breathing exercises designed for pregnancy.",
                "benefits": "Reduces stress, improves flexibility, and helps with breathing during labor.",
            }),
            MappingProxyType({
                "name": "Swimming",
                "emoji": "🏊‍♀️",
                "description": "Swim or do water aerobics in a comfortable temperature pool.",
                "benefits": "Low-impact exercise that supports your weight and reduces swelling.",
            }),
            MappingProxyType({
                "name": "Pelvic Floor Exercises",
                "emoji": "💪",
                "description": "Practice Kegel exercises by tightening pelvic muscles for 5-10 seconds.",
                "benefits": "Strengthens muscles for labor and recovery, prevents incontinence.",
            }),
        ),
    }),
    Language.HI: MappingProxyType({
        "intro": (
            "{weeks} सप्ताह में, हल्का व्यायाम आपके और आपके बच्चे दोनों के लिए "
            "लाभदायक है। यहां गर्भावस्था के इस चरण के लिए कुछ सुरक्षित "
            "गतिविधियां दी गई हैं।"
        ),
        "exercises": (
            MappingProxyType({
                "name": "चलना",
                "emoji": "🚶‍♀️",
                "description": "आरामदायक गति से प्रतिदिन 20-30 मिनट चलें।",
                "benefits": "रक्त संचार में सुधार, फिटनेस बनाए रखना, और पूरी गर्भावस्था में सुरक्षित।",
            }),
            MappingProxyType({
                "name": "प्रसव पूर्व योग",
                "emoji": "🧘‍♀️",
                "description": "गर्भावस्था के लिए डिज़ाइन किए गए कोमल खिंचाव और श्वास व्यायाम।",
                "benefits": "तनाव कम करता है, लचीलापन बढ़ाता है, और प्रसव के दौरान श्वास में मदद करता है।",
            }),
            MappingProxyType({
                "name": "तैराकी",
                "emoji": "🏊‍♀️",
                "description": "आरामदायक तापमान वाले पूल में तैराकी या वाटर एरोबिक्स करें।",
                "benefits": "कम प्रभाव वाला व्यायाम जो आपके वजन का समर्थन करता है और सूजन कम करता है।",
            }),
            MappingProxyType({
                "name": "पेल्विक फ्लोर व्यायाम",
                "emoji": "💪",
                "description": "श्रोणि की मांसपेशियों को 5-10 सेकंड के लिए कसकर केगेल व्यायाम का अभ्यास करें।",
                "benefits": "प्रसव और रिकवरी के लिए मांसपेशियों को मजबूत करता है, असंयम को रोकता है।",
            }),
        ),
    }),
    Language.AR: MappingProxyType({
        "intro": (
            "في الأسبوع {weeks}، التمارين اللطيفة مفيدة لك ولطفلك. إليك بعض "
            "الأنشطة الآمنة الموصى بها لهذه المرحلة من الحمل."
        ),
        "exercises": (
            MappingProxyType({
                "name": "المشي",
                "emoji": "🚶‍♀️",
                "description": "امشي بوتيرة مريحة لمدة 20-30 دقيقة يومياً.",
                "benefits": "يحسن الدورة الدموية، يحافظ على اللياقة، وآمن طوال فترة الحمل.",
            }),
            MappingProxyType({
                "name": "يوغا ما قبل الولادة",
                "emoji": "🧘‍♀️",
                "description": "تمارين التمدد اللطيفة والتنفس المصممة للحمل.",
                "benefits": "يقلل التوتر، يحسن المرونة، ويساعد في التنفس أثناء المخاض.",
            }),
            MappingProxyType({
                "name": "السباحة",
                "emoji": "🏊‍♀️",
                "description": "اسبحي أو مارسي التمارين المائية في مسبح بدرجة حرارة مريحة.",
                "benefits": "تمرين منخفض التأثير يدعم وزنك ويقلل التورم.",
            }),
            MappingProxyType({
                "name": "تمارين قاع الحوض",
                "emoji": "💪",
                "description": "مارسي تمارين كيجل من خلال شد عضلات الحوض لمدة 5-10 ثوانٍ.",
                "benefits": "يقوي العضلات للمخاض والتعافي، يمنع سلس البول.",
            }),
        ),
    }),
    Language.UR: MappingProxyType({
        "intro": (
            "{weeks} ہفتے میں، ہلکی ورزش آپ اور آپ کے بچے دونوں کے لیے فائدہ مند "
            "ہے۔ یہاں حمل کے اس مرحلے کے لیے کچھ محفوظ سرگرمیاں ہیں۔"
        ),
        "exercises": (
            MappingProxyType({
                "name": "چلنا",
                "emoji": "🚶‍♀️",
                "description": "روزانہ 20-30 منٹ آرام دہ رفتار سے چلیں۔",
                "benefits": "خون کی گردش بہتر بناتا ہے، تندرستی برقرار رکھتا ہے، اور پوری حمل میں محفوظ ہے۔",
            }),
            MappingProxyType({
                "name": "زچگی سے پہلے یوگا",
                "emoji": "🧘‍♀️",
                "description": "حمل کے لیے ڈیزائن کیے گئے نرم کھینچاؤ اور سانس کی مشقیں۔",
                "benefits": "تناؤ کم کرتا ہے، لچک بڑھاتا ہے، اور زچگی کے دوران سانس لینے میں مدد کرتا ہے۔",
            }),
            MappingProxyType({
                "name": "تیراکی",
                "emoji": "🏊‍♀️",
                "description": "آرام دہ درجہ حرارت والے پول میں تیراکی یا واٹر ایروبکس کریں۔",
                "benefits": "کم اثر والی ورزش جو آپ کے وزن کو سہارا دیتی ہے اور سوجن کم کرتی ہے۔",
            }),
            MappingProxyType({
                "name": "پیلوک فلور ورزشیں",
                "emoji": "💪",
                "description": "شرونی کے پٹھوں کو 5-10 سیکنڈ تک سخت کرکے کیگل ورزش کی مشق کریں۔",
                "benefits": "زچگی اور بحالی کے لیے پٹھوں کو مضبوط بناتا ہے، پیشاب کی بے ضابطگی سے بچاتا ہے۔",
            }),
        ),
    }),
})


def get_fallback_development(weeks: Any, days: Any, language: Any) -> dict:
    """Localized development facts with weeks/days filled in."""
    template = _DEVELOPMENT_FALLBACK[resolve_language(language)]
    w, d = format_count(weeks), format_count(days)
    return {
        "icon": template["icon"],
        "length": template["length"],
        "weight": template["weight"],
        "comparison": template["comparison"],
        "title": template["title"].format(weeks=w, days=d),
        "description": template["description"].format(weeks=w, days=d),
        "developments": list(template["developments"]),
    }


def get_fallback_exercises(weeks: Any, days: Any, language: Any) -> dict:
    """Localized exercise list; only the intro mentions the week."""
    template = _EXERCISE_FALLBACK[resolve_language(language)]
    return {
        "intro": template["intro"].format(
            weeks=format_count(weeks), days=format_count(days),
        ),
        "exercises": [dict(exercise) for exercise in template["exercises"]],
    }
