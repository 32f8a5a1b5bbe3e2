"""All magic numbers, word lists and configuration constants."""

PT_BR = "pt-BR"
EN_US = "en-US"

MIXED_THRESHOLD_RATIO = 0.3         # share of tokens that must be Portuguese words
MIXED_MIN_TOKENS = 2                # more tokens than this counts as running text
CHUNK_MAX_CHARS = 3500              # chars, max chunk size before sentence segmentation
WORDS_PER_SECOND = {PT_BR: 2.3, EN_US: 2.7}
DEFAULT_WORDS_PER_SECOND = 2.5      # for languages missing from WORDS_PER_SECOND
MIN_SEGMENT_SECONDS = 0.6           # floor for a single segment's estimated duration

PAUSE_SAME_LANGUAGE_MS = 250        # ms pause between segments in the same language
PAUSE_LANGUAGE_CHANGE_MS = 450      # ms pause when the voice switches language

PCM_SAMPLE_RATE = 16000             # Hz, realtime speech API input/output rate
PCM_MIME_TYPE = "audio/pcm"

OUTPUT_BITRATE = "128k"             # MP3 output bitrate
TTS_RETRY_COUNT = 3                 # max retries per TTS segment
TTS_RETRY_BASE_DELAY = 1.0          # seconds, base delay for exponential backoff
TTS_RATE = "-10%"                   # speech rate: learners get a slightly slower voice
CLIP_DIGEST_LENGTH = 12             # hex chars of the text/voice/rate digest in clip names
OUTPUT_DIR = "output"
VERSION = "0.1.0"

# Common Portuguese words for word-frequency detection
PORTUGUESE_WORDS = frozenset({
    # basic words
    "por", "favor", "obrigado", "obrigada", "sim", "não", "nao", "como", "onde",
    "quando", "que", "o", "a", "os", "as", "um", "uma", "de", "da", "do", "para",
    "com", "em", "na", "no", "eu", "você", "voce", "ele", "ela", "nós", "nos",
    # learning
    "ensine", "ensinar", "aprender", "estudar", "explicar", "explique", "ajude",
    "ajudar", "entender", "compreender", "dúvida", "duvida", "pergunta", "questão",
    "questao", "lição", "licao", "aula", "professor", "professora",
    # verbs
    "ser", "estar", "ter", "fazer", "ir", "vir", "dar", "ver", "saber", "poder",
    "querer", "dizer", "falar", "conhecer", "trabalhar", "morar", "gostar",
    "precisar", "conseguir", "começar", "comecar", "terminar",
    # pronouns and adverbs
    "me", "meu", "minha", "seus", "suas", "dele", "dela", "nosso", "nossa",
    "muito", "mais", "menos", "bem", "mal", "hoje", "ontem", "amanhã", "amanha",
    "agora", "depois", "antes", "sempre", "nunca", "já", "ja",
    # question words
    "qual", "quais", "quem", "quanto", "quantos", "quantas", "porque", "porquê",
    # polite expressions
    "desculpe", "desculpa", "licença", "licenca",
})

# High-signal Portuguese constructs, checked before word counting
PORTUGUESE_PATTERNS = (
    r"\b(por favor|obrigad[oa]|desculp[ae]|com licen[cç]a)\b",
    r"\b(me ensine|me ajude|me explique)\b",
    r"\b(como|onde|quando|por que|porque) .+\?",
    r"\b(eu|você|voce|ele|ela) (sou|é|e|está|esta|tem|faz|vai|quer)\b",
    r"\b(meu|minha|seu|sua|nosso|nossa) .+",
    r"\b(muito|mais|menos) .+",
)

ENGLISH_TERMS = (
    "present perfect", "past simple", "future", "grammar", "vocabulary",
    "pronunciation", "speaking", "listening", "reading", "writing", "english",
    "teacher", "lesson", "practice", "exercise",
)

ENGLISH_STOPWORDS = frozenset({
    "the", "and", "to", "of", "in", "is", "you", "that", "it", "for", "on",
    "with", "as", "this", "are", "be", "or", "by", "from", "at", "have", "an",
    "was", "not", "but", "they", "we", "can", "your", "will", "if", "do",
})

PORTUGUESE_STOPWORDS = frozenset({
    "de", "que", "o", "a", "e", "do", "da", "em", "um", "para", "com", "não",
    "uma", "os", "no", "se", "na", "por", "mais", "as", "dos", "como", "mas",
    "foi", "ao", "ele", "das", "tem", "à", "seu", "sua", "ou", "ser", "quando",
    "muito", "há", "nos", "já", "está",
})

# Short lists used by the paragraph-level player
PARAGRAPH_ENGLISH_WORDS = frozenset({
    "the", "and", "is", "are", "to", "of", "in", "that", "it", "with",
})
PARAGRAPH_PORTUGUESE_WORDS = frozenset({
    "o", "a", "os", "as", "é", "são", "para", "de", "em", "que", "com",
})

DEFAULT_EXERCISE_TYPE = "multiple_choice"

MARKER_INTRODUCTION = "Introduction"
MARKER_CONTENT = "Content"
# Checked in order; first keyword hit wins
MARKER_KEYWORDS = (
    ("Examples", ("example", "exemplo")),
    ("Grammar", ("grammar", "gramática")),
    ("Practice", ("practice", "prática")),
)
