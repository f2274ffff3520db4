"""Slide content for the ILD Treatable Traits deck."""

from traits_deck.core.registry import SlideRegistry
from traits_deck.domain.entities.slide import (
    AccordionGroup,
    AccordionSpec,
    Callout,
    Card,
    CardGrid,
    Checklist,
    Paragraph,
    Slide,
    Stage,
    StageFlow,
)

INTRO = Slide(
    id="intro",
    title="間質性肺疾患（ILD）と Treatable Traits",
    subtitle="〜 包括的なプレシジョン・メディシン（精密医療）へのアプローチ 〜",
    background="gradient-blue",
    decoration="lung",
    particles=True,
    body=(
        Checklist(
            title="📝 解説のポイント：",
            items=(
                "従来の診断・治療の課題",
                "「Treatable Traits（治療可能な特性）」とは？",
                "4つの重要な領域（ドメイン）",
            ),
        ),
    ),
)

PROBLEM = Slide(
    id="problem",
    title="現在のILD管理の課題",
    background="plain",
    body=(
        CardGrid(
            cards=(
                Card(
                    icon="search",
                    title="診断の難しさ",
                    text="ILDの分類は複雑で、診断が難しいケースや「分類不能」なケースも多い。",
                    tone="amber",
                ),
                Card(
                    icon="pill",
                    title="薬物療法の限界",
                    text="抗線維化薬などは進行を遅らせるが、咳や息切れ、生活の質(QOL)の改善には不十分なことも。",
                    tone="red",
                ),
                Card(
                    icon="stethoscope",
                    title="ケアの断片化",
                    text="肺の病変ばかりに注目し、合併症や精神面、生活習慣のケアが不十分になりがち。",
                    tone="purple",
                ),
            ),
        ),
        Callout(
            text="診断名に基づいた「画一的な治療」だけでは、患者さん全体を支えきれない...",
        ),
    ),
)

SOLUTION = Slide(
    id="solution",
    title="解決策：Treatable Traits アプローチ",
    background="gradient-green",
    body=(
        Paragraph(
            text="喘息やCOPDですでに導入されている「個別化医療」の考え方です。",
            emphasis=True,
        ),
        Paragraph(
            text=(
                "診断名（ラベル）にとらわれすぎず、患者さん一人ひとりの"
                "「治療可能な特性（Traits）」をリストアップし、それぞれに対応します。"
            ),
        ),
        Checklist(
            title="Trait（特性）の3条件",
            items=(
                "臨床的に重要である（予後やQOLに関わる）",
                "特定・測定が可能である（バイオマーカーなど）",
                "治療・介入が可能である",
            ),
        ),
    ),
)

DOMAINS = Slide(
    id="domains",
    title="4つのTreatable Traits領域",
    subtitle="カードをタップして詳細を確認してください",
    background="muted",
    body=(
        AccordionGroup(
            hint="クリックして詳細を表示...",
            accordions=(
                AccordionSpec(
                    id="aetiological",
                    title="病因 (Aetiological)",
                    icon="dna",
                    tone="orange",
                    lead="具体的な特性の例：",
                    items=(
                        "免疫異常・炎症",
                        "進行性肺線維化 (PPF)",
                        "自己抗体",
                        "喫煙",
                        "環境曝露 (抗原)",
                        "薬剤性",
                    ),
                ),
                AccordionSpec(
                    id="pulmonary",
                    title="肺病変 (Pulmonary)",
                    icon="lung",
                    tone="blue",
                    lead="具体的な特性の例：",
                    items=(
                        "肺感染症",
                        "肺気腫 (CPFE)",
                        "肺高血圧症",
                        "肺がん",
                        "低酸素血症",
                        "慢性咳嗽",
                        "呼吸困難",
                    ),
                ),
                AccordionSpec(
                    id="extra-pulmonary",
                    title="肺外病変 (Extra-pulmonary)",
                    icon="heart",
                    tone="green",
                    lead="具体的な特性の例：",
                    items=(
                        "閉塞性睡眠時無呼吸 (OSA)",
                        "胃食道逆流 (GERD)",
                        "体重減少/肥満",
                        "不安・抑うつ",
                        "虚血性心疾患",
                        "身体機能低下",
                    ),
                ),
                AccordionSpec(
                    id="behavioural",
                    title="行動・生活習慣 (Behavioural)",
                    icon="users",
                    tone="purple",
                    lead="具体的な特性の例：",
                    items=(
                        "治療アドヒアランス不良",
                        "身体活動不足",
                        "社会的孤立",
                        "ポリファーマシー (多剤併用)",
                        "家族・社会的支援不足",
                    ),
                ),
            ),
        ),
    ),
)

CONCLUSION = Slide(
    id="conclusion",
    title="未来への展望",
    background="gradient-sky",
    body=(
        StageFlow(
            stages=(
                Stage(
                    label="Stage 1",
                    title="特性の特定",
                    text="臨床的な重要性と測定方法の確立",
                    tone="blue",
                ),
                Stage(
                    label="Stage 2",
                    title="メカニズム解明",
                    text="バイオマーカーと介入法の開発",
                    tone="indigo",
                ),
                Stage(
                    label="Stage 3",
                    title="臨床試験",
                    text="実臨床への導入と効果検証",
                    tone="purple",
                ),
            ),
        ),
        Callout(
            title="まとめ",
            text=(
                "Treatable Traitsアプローチは、ILDの診断名だけでなく、"
                "「その人全体」を診るためのフレームワークです。"
                "多職種チームによる包括的なケアで、患者さんの予後と生活の質を改善します。"
            ),
            tone="blue",
        ),
    ),
)

SLIDES = (INTRO, PROBLEM, SOLUTION, DOMAINS, CONCLUSION)


def build_registry() -> SlideRegistry:
    return SlideRegistry(SLIDES)
