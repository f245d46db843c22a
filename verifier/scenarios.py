"""
Scenario catalogue.
Every case runs against the live translator and against the mocked page;
the two suites share IDs and inputs but not expectations.
"""

from typing import Dict, Iterable, List, Optional

from .models import CheckKind, InputAction, ReadMode, Scenario, Suite
from .mock_page import INPUT_SELECTOR, OUTPUT_SELECTOR

# (id, title, singlish input, expected sinhala output, live check)
CASES = [
    # ============================================================
    # POSITIVE FUNCTIONAL
    # ============================================================
    ("Pos_Fun_0001", "Simple sentence – daily usage",
     "mama gammiris vaththata yanna hadhannee",
     "මම ගම්මිරිස් වත්තට යන්න හදන්නේ", CheckKind.EQUALS),
    ("Pos_Fun_0002", "Compound sentence",
     "ammaa rupiyal dhahasak dhunnaa haebaeyi mama prathiksheepa karaa.",
     "අම්මා රුපියල් දහසක් දුන්නා හැබැයි මම ප්‍රතික්ශේප කරා.", CheckKind.EQUALS),
    ("Pos_Fun_0003", "Complex sentence",
     "oyaa niyamitha veelavata vaeda ivara karaa nam oyaata dhavasama nivaaduvak labaa ganna puLuvan",
     "ඔයා නියමිත වේලවට වැඩ ඉවර කරා නම් ඔයාට දවසම නිවාඩුවක් ලබා ගන්න පුළුවන්", CheckKind.EQUALS),
    ("Pos_Fun_0004", "Question (interrogative)",
     "oyaata meeka lassanayidha?",
     "ඔයාට මේක ලස්සනයිද?", CheckKind.EQUALS),
    ("Pos_Fun_0005", "Command (imperative)",
     "meesaya ussanna.",
     "මේසය උස්සන්න.", CheckKind.EQUALS),
    ("Pos_Fun_0006", "Positive sentence",
     "mahansi vii vaeda kara saarThakathvayee ihaLatama yaamata balaaporoththu venavaa.",
     "මහන්සි වී වැඩ කර සාර්ථකත්වයේ ඉහළටම යාමට බලාපොරොත්තු වෙනවා.", CheckKind.EQUALS),
    ("Pos_Fun_0007", "Negative sentence",
     "mata kisivak kiivee naee",
     "මට කිසිවක් කීවේ නෑ", CheckKind.EQUALS),
    ("Pos_Fun_0008", "Polite request (long)",
     "mata thava eka podi udhavvak kara ganna puLuvandha? karuNaakaralaa ee lipiya kiyavaa balalaa "
     "mata athsanak dhaa ganna puLuvan nam obathumaata loku pinak. obathumaagee aDhika "
     "kaaryayabahulathvaya maedha mata udhav kiriima gaena godaak sthuuthiiyi.",
     "මට තව එක පොඩි උදව්වක් කර ගන්න පුළුවන්ද? කරුණාකරලා ඒ ලිපිය කියවා බලලා මට අත්සනක් දා ගන්න "
     "පුළුවන් නම් ඔබතුමාට ලොකු පිනක්. ඔබතුමාගේ අධික කාර්යයබහුලත්වය මැද මට උදව් කිරීම ගැන ගොඩාක් ස්තූතීයි.",
     CheckKind.EQUALS),
    ("Pos_Fun_0009", "Informal phrasing",
     "dhepaarak chek karalaa balapan",
     "දෙපාරක් චෙක් කරලා බලපන්", CheckKind.EQUALS),
    ("Pos_Fun_0010", "Repeated words",
     "mama dhaena gaththa ela ela",
     "මම දැන ගත්තා එල එල", CheckKind.EQUALS),
    ("Pos_Fun_0011", "Joined words (no spaces)",
     "mamavelatagihinennainnavaa",
     "මමවෙලටගිහින්එන්නඉන්නවා", CheckKind.EQUALS),
    ("Pos_Fun_0012", "Multi-word expression",
     "mata epaa poddak inna",
     "මට එපා පොඩ්ඩක් ඉන්න", CheckKind.EQUALS),
    ("Pos_Fun_0013", "Past tense",
     "aliyaa iiyee perahaeree giyaa",
     "අලියා ඊයේ පෙරහැරේ ගියා", CheckKind.EQUALS),
    ("Pos_Fun_0014", "Present tense",
     "mama dhaen thiintha gaanavaa",
     "මම දැන් තීන්ත ගානවා", CheckKind.EQUALS),
    ("Pos_Fun_0015", "Future tense",
     "api iiLaGA miyaesiyata emu",
     "අපි ඊළඟ මියැසියට එමු", CheckKind.EQUALS),
    ("Pos_Fun_0016", "Pronouns (I / you / we)",
     "mama thoosea kanna yanna hadhannee, oyath enavadha kanna, api yamu ehenam",
     "මම තෝසේ කන්න යන්න හදන්නේ, ඔයත් එනවද කන්න, අපි යමු එහෙනම්", CheckKind.EQUALS),
    ("Pos_Fun_0017", "Plural usage",
     "bakamuuNoo kaee gahanavaa",
     "බකමූණෝ කෑ ගහනවා", CheckKind.EQUALS),
    ("Pos_Fun_0018", "Mixed Singlish + English",
     "Ammaa, office yanna kalin cake eka break venna dhaemma",
     "අම්මා, office යන්න කලින් cake එක break වෙන්න දැම්මා", CheckKind.EQUALS),
    ("Pos_Fun_0019", "English technical terms",
     "apee course page eka youtube, facebook follow karanna. heta zoom & teams meeting valata "
     "adhaaLa link eka labaa dhenavaa",
     "අපේ course page එක youtube, facebook follow කරන්න. හෙට zoom & teams meeting වලට "
     "අදාළ link එක ලබා දෙනවා", CheckKind.EQUALS),
    ("Pos_Fun_0020", "Place names (Colombo, Kandy)",
     "api chilaw giyaata passe madampe gihin beheth aragena munneeshvaram koovilata yanavaa.",
     "අපි chilaw ගියාට පස්සෙ madampe ගිහින් බෙහෙත් අරගෙන මුන්නේශ්වරම් කෝවිලට යනවා.", CheckKind.EQUALS),
    ("Pos_Fun_0021", "Punctuation marks",
     "vaav!!! oyaa poth , paeen , kadadhaasi genaavadha?",
     "වාව්!!! ඔයා පොත් , පෑන් , කඩදාසි ගෙනාවද?", CheckKind.EQUALS),
    ("Pos_Fun_0022", "Currency / date / time",
     "Rs. 998 paekeej eka anidhdhaa udhee 11.30ta dhaemiimata puLuvandha?",
     "Rs. 998 පැකේජ් එක අනිද්දා උදේ 11.30ට දැමීමට පුළුවන්ද?", CheckKind.EQUALS),
    ("Pos_Fun_0023", "Medium-length paragraph",
     "parisaraya yanu minisaa saha samastha jiivii padhDhathiyeema paevaethma thiiraNaya karana "
     "saaDhakayayi. varthamaanayee kaarmiikaraNaya saha naagariikaraNaya nisaa parisaraya "
     "dhuuShaNaya viima barapathala gaetaLuvaki.",
     "පරිසරය යනු මිනිසා සහ සමස්ත ජීවී පද්ධතියේම පැවැත්ම තීරණය කරන සාධකයයි. වර්තමානයේ "
     "කාර්මීකරණය සහ නාගරීකරණය නිසා පරිසරය දූෂණය වීම බරපතල ගැටළුවකි.", CheckKind.EQUALS),
    ("Pos_Fun_0024", "Long-length paragraph",
     "aDhaapanaya yanu minis jiivithayaka aththivaaramayi. eya pudhgalayekuge dhaenuma, kusalathaa "
     "saha aakalpa varDhanaya karamin samaajayee saarThaka puravaesiyeku viimata maga paadhayi. "
     "hoDHA aDhaapanaya laebiimen pudhgalayekuta thamangee dhiyuNuva LaGAaa kara gaeniimata pamaNak "
     "nova, ratee aarThika haa samaajiiya sanvarDhanayata dha dhaayaka vee. varthamaanayee "
     "thaaksaNika lookayee aBhiyooga valata muhuNa dhiima saDHAhaa aDhaapanaya avashYA vana athara , "
     "eya pudhgala saaDhaaraNa samaajayak udhesaa laebena hoDHAma aayoojanayakii.",
     "අධාපනය යනු මිනිස් ජීවිතයක අත්තිවාරමයි. එය පුද්ගලයෙකුගෙ දැනුම, කුසලතා සහ ආකල්ප වර්ධනය කරමින් "
     "සමාජයේ සාර්ථක පුරවැසියෙකු වීමට මග පාදයි. හොඳ අධාපනය ලැබීමෙන් පුද්ගලයෙකුට තමන්ගේ දියුණුව ළඟා "
     "කර ගැනීමට පමණක් නොව, රටේ ආර්ථික හා සමාජීය සන්වර්ධනයට ද දායක වේ. වර්තමානයේ තාක්සණික ලෝකයේ "
     "අභියෝග වලට මුහුණ දීම සඳහා අධාපනය අවශ්‍ය වන අතර , එය පුද්ගල සාධාරණ සමාජයක් උදෙසා ලැබෙන "
     "හොඳම ආයෝජනයකී.", CheckKind.EQUALS),

    # ============================================================
    # NEGATIVE FUNCTIONAL
    # ============================================================
    ("Neg_Fun_0001", "Heavy slang confusion",
     "adeeh machan eeka nam  supiriyak neh?",
     "අඩේහ් මචන් ඒක නම් සුපිරියක් නෙහ්?", CheckKind.NOT_EQUALS),
    ("Neg_Fun_0002", "Excessive joined words",
     "akkaapansalatayanavaaehigiyaamavelaayanavaaenna",
     "අක්කා පන්සලට යනවා එහි ගියාම වෙලා යනවා එන්න", CheckKind.NOT_EQUALS),
    ("Neg_Fun_0003", "Random spacing",
     "mama      raajakaariyata        yanavaa",
     "මම රාජකාරියට යනවා", CheckKind.NOT_EQUALS),
    ("Neg_Fun_0004", "Long paragraph with typos",
     "ammaa savasa midhule idhagena idhdhii lassana kurullek piyaBanava dhaekka",
     "අම්මා සවස මිදුලේ ඉඳගෙන ඉද්දී ලස්සන කුරුල්ලෙක් පියඹනවා දැක්කා", CheckKind.NOT_EQUALS),
    ("Neg_Fun_0005", "Mixed English abbreviations",
     "eyaa major thanathurata promote karalaa",
     "එයා major තනතුරට promote කරලා", CheckKind.EQUALS),
    ("Neg_Fun_0006", "Informal + grammar break",
     "oyaa kannee naee.gihin kaapan ehenam",
     "ඔයා කන්නේ නෑ.ගිහින් කාපන් එහෙනම්", CheckKind.EQUALS),
    ("Neg_Fun_0007", "Numeric overload",
     "2026/01/31 12.00 P.M.",
     "2026/01/31 12.00 P.M.", CheckKind.EQUALS),
    ("Neg_Fun_0008", "Line breaks + formatting",
     "aayuboovan \\nsuBha udhaeesanak\\nsthuuthiyii",
     "ආයුබෝවන් \\nසුභ උදෑසනක් \\nස්තූතියී", CheckKind.NOT_EQUALS),
    ("Neg_Fun_0009", "Ambiguous phrasing",
     "guruvarayaa kivvaa eeka vaeradhii kiyalaa",
     "ගුරුවරයා කිව්වා ඒක වැරදී කියලා", CheckKind.EQUALS),
    ("Neg_Fun_0010", "Edge grammar case",
     "mata bonna naee baee",
     "මට බොන්න නෑ බෑ", CheckKind.NOT_EQUALS),
]

# Long paragraphs are read straight from the second field after a shorter wait
SECOND_FIELD_READS = {
    "Pos_Fun_0008": 1500,
    "Pos_Fun_0023": 1500,
    "Pos_Fun_0024": 2000,
}

MOCK_SETTLE_MS = 50


def live_scenarios() -> List[Scenario]:
    """Scenarios against the real translator, with exact expectations."""
    scenarios = []

    for case_id, title, text, expected, check in CASES:
        scenario = Scenario(
            id=case_id,
            title=title,
            suite=Suite.LIVE,
            input=text,
            expected=expected,
            check=check,
        )
        if case_id in SECOND_FIELD_READS:
            scenario.read_mode = ReadMode.SECOND_FIELD
            scenario.settle_ms = SECOND_FIELD_READS[case_id]
        scenarios.append(scenario)

    scenarios.extend([
        Scenario(
            id="Pos_UI_0001",
            title="Real-time Sinhala output updates while typing",
            suite=Suite.LIVE,
            input="mama paadamak karanavaa",
            expected="මම",
            check=CheckKind.CONTAINS,
            action=InputAction.TYPE,
        ),
        Scenario(
            id="Pos_UI_0002",
            title="Clearing input clears output",
            suite=Suite.LIVE,
            input="api heta dhuvamu",
            expected="",
            check=CheckKind.CLEARS,
            read_mode=ReadMode.SECOND_FIELD,
        ),
    ])

    return scenarios


def mock_scenarios() -> List[Scenario]:
    """Scenarios against the mocked page, with relational expectations."""
    scenarios = []

    for case_id, title, text, _expected, _check in CASES:
        if case_id.startswith("Neg_Fun"):
            check, expected = CheckKind.VISIBLE, None
        elif case_id == "Pos_Fun_0004":
            check, expected = CheckKind.MATCHES, "Translated"
        else:
            check, expected = CheckKind.NOT_EMPTY, None

        scenarios.append(Scenario(
            id=case_id,
            title=title,
            suite=Suite.MOCK,
            input=text,
            expected=expected,
            check=check,
            input_selector=INPUT_SELECTOR,
            output_selector=OUTPUT_SELECTOR,
            settle_ms=MOCK_SETTLE_MS,
        ))

    scenarios.extend([
        Scenario(
            id="Pos_UI_0001",
            title="Real-time Sinhala output updates while typing",
            suite=Suite.MOCK,
            input="mama paadamak karanavaa",
            append_text=" heta",
            check=CheckKind.CHANGES_ON_APPEND,
            action=InputAction.TYPE,
            input_selector=INPUT_SELECTOR,
            output_selector=OUTPUT_SELECTOR,
            settle_ms=MOCK_SETTLE_MS,
        ),
        Scenario(
            id="Pos_UI_0002",
            title="Clearing input clears output",
            suite=Suite.MOCK,
            input="api heta dhuvamu",
            expected="",
            check=CheckKind.CLEARS,
            input_selector=INPUT_SELECTOR,
            output_selector=OUTPUT_SELECTOR,
            settle_ms=MOCK_SETTLE_MS,
        ),
    ])

    return scenarios


def get_scenarios(suites: Iterable[Suite], only: Optional[Iterable[str]] = None) -> List[Scenario]:
    """
    Collect scenarios for the given suites, optionally filtered by ID.

    Raises:
        ValueError: if an ID in only matches no scenario
    """
    builders = {Suite.LIVE: live_scenarios, Suite.MOCK: mock_scenarios}

    scenarios: List[Scenario] = []
    for suite in suites:
        scenarios.extend(builders[Suite(suite)]())

    if only:
        wanted = set(only)
        unknown = wanted - {s.id for s in scenarios}
        if unknown:
            raise ValueError(f"Unknown scenario ID(s): {', '.join(sorted(unknown))}")
        scenarios = [s for s in scenarios if s.id in wanted]

    return scenarios


def scenarios_by_id(suite: Suite) -> Dict[str, Scenario]:
    return {s.id: s for s in get_scenarios([suite])}
