DEFAULT_LANGUAGE = "en"

# Shown in the language selector, in each language's own script
LANGUAGE_NAMES = {
    "en": "English",
    "hi": "हिन्दी",
    "or": "ଓଡ଼ିଆ",
}

LABELS = {
    "en": {
        "page_title": "Cattle Labs - Cow Breeds",
        "logo_alt": "Cattle Labs Logo",
        "nav_home": "Home",
        "nav_about": "About",
        "nav_contact": "Contact",
        "heading": "Explore Cow Breeds 🐄",
        "subtitle": "Discover cow breeds from across the world. Search by name or location below.",
        "search_placeholder": "Search cow breeds...",
        "language_label": "Language",
        "loading": "Loading breeds...",
        "error": "❌ Could not fetch cow breeds. Try again later.",
        "no_results": "No breeds found 🐄",
        "results_count_one": "{count} breed found",
        "results_count": "{count} breeds found",
        "location": "Location",
        "main_uses": "Main Uses",
        "physical": "Physical",
        "species": "Species",
        "trait": "Trait",
        "registered_count": "Registered Count",
    },
    "hi": {
        "page_title": "कैटल लैब्स - गाय की नस्लें",
        "logo_alt": "कैटल लैब्स लोगो",
        "nav_home": "होम",
        "nav_about": "हमारे बारे में",
        "nav_contact": "संपर्क",
        "heading": "गाय की नस्लें खोजें 🐄",
        "subtitle": "दुनिया भर की गाय की नस्लों के बारे में जानें। नीचे नाम या स्थान से खोजें।",
        "search_placeholder": "गाय की नस्लें खोजें...",
        "language_label": "भाषा",
        "loading": "नस्लें लोड हो रही हैं...",
        "error": "❌ गाय की नस्लें प्राप्त नहीं हो सकीं। कृपया बाद में पुनः प्रयास करें।",
        "no_results": "कोई नस्ल नहीं मिली 🐄",
        "results_count_one": "{count} नस्ल मिली",
        "results_count": "{count} नस्लें मिलीं",
        "location": "स्थान",
        "main_uses": "मुख्य उपयोग",
        "physical": "शारीरिक विवरण",
        "species": "प्रजाति",
        "trait": "प्रजनन गुण",
        "registered_count": "पंजीकृत संख्या",
    },
    "or": {
        "page_title": "କ୍ୟାଟଲ ଲ୍ୟାବସ - ଗାଈ ପ୍ରଜାତି",
        "logo_alt": "କ୍ୟାଟଲ ଲ୍ୟାବସ ଲୋଗୋ",
        "nav_home": "ମୂଳପୃଷ୍ଠା",
        "nav_about": "ଆମ ବିଷୟରେ",
        "nav_contact": "ଯୋଗାଯୋଗ",
        "heading": "ଗାଈ ପ୍ରଜାତି ଖୋଜନ୍ତୁ 🐄",
        "subtitle": "ସାରା ବିଶ୍ୱର ଗାଈ ପ୍ରଜାତି ବିଷୟରେ ଜାଣନ୍ତୁ। ତଳେ ନାମ କିମ୍ବା ସ୍ଥାନ ଦ୍ୱାରା ଖୋଜନ୍ତୁ।",
        "search_placeholder": "ଗାଈ ପ୍ରଜାତି ଖୋଜନ୍ତୁ...",
        "language_label": "ଭାଷା",
        "loading": "ପ୍ରଜାତି ଲୋଡ୍ ହେଉଛି...",
        "error": "❌ ଗାଈ ପ୍ରଜାତି ଆଣିହେଲା ନାହିଁ। ଦୟାକରି ପରେ ପୁଣି ଚେଷ୍ଟା କରନ୍ତୁ।",
        "no_results": "କୌଣସି ପ୍ରଜାତି ମିଳିଲା ନାହିଁ 🐄",
        "results_count_one": "{count}ଟି ପ୍ରଜାତି ମିଳିଲା",
        "results_count": "{count}ଟି ପ୍ରଜାତି ମିଳିଲା",
        "location": "ସ୍ଥାନ",
        "main_uses": "ମୁଖ୍ୟ ବ୍ୟବହାର",
        "physical": "ଶାରୀରିକ ବିବରଣୀ",
        "species": "ଜାତି",
        "trait": "ପ୍ରଜନନ ଗୁଣ",
        "registered_count": "ପଞ୍ଜୀକୃତ ସଂଖ୍ୟା",
    },
}


def normalize_language(code, default=DEFAULT_LANGUAGE):
    """Return a supported two-letter code, falling back to default."""
    if isinstance(code, str):
        code = code.strip().lower()
        if code in LABELS:
            return code
    return default if default in LABELS else DEFAULT_LANGUAGE


def get_labels(code):
    return LABELS[normalize_language(code)]
