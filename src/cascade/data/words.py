"""
Built-in word lists.

Common English words used by the procedural puzzle generator and by the
letter-frequency analysis of the simulation harness. Lists are lower-case,
one length per list; dictionary correctness is not checked here.
"""

from typing import Dict, Tuple


def _split(text: str) -> Tuple[str, ...]:
    return tuple(text.split())


FOUR_LETTER_WORDS = _split("""
    able acid aged also area army away baby back bail bake bald ball band
    bank barn base bath bead beam bean bear beat beef been beer bell belt
    bend best bike bill bird bite blow blue boat body boil bold bolt bone
    book boot born boss both bowl bulk burn bush busy cake call calm came
    camp card care cart case cash cast cave cell chef chin chip city clay
    clip club coal coat code coin cold come cook cool cope copy cord core
    corn cost crew crop cube cure dark dart data date dawn deal dear debt
    deck deep deer desk dial dice diet dirt dish dive dock does doll done
    door dose down drag draw drew drop drum duck dull dust duty each earl
    earn ease east easy edge else even ever exam exit face fact fade fail
    fair fall fame farm fast fate fear feed feel feet fell felt file fill
    film find fine fire firm fish fist five flag flat flew flip flow foam
    fold folk food fool foot fork form fort four free frog from fuel full
    fund gain game gate gave gear gift girl give glad glow glue goal goat
    gold golf gone good grab gray grew grid grin grip grow gulf hair half
    hall hand hang hard harm hate have hawk head heal heap hear heat held
    helm help herb here hero hide high hill hint hire hold hole holy home
    hood hook hope horn hose host hour huge hung hunt hurt idea inch into
    iron item jazz join joke jump jury just keen keep kept kick kind king
    kiss kite knee knew knit knot know lack lady laid lake lamp land lane
    last late lawn lead leaf lean left lend lens less life lift like lime
    line link lion list live load loaf loan lock loft logo long look loop
    lord lose loss lost loud love luck lung made mail main make male mall
    many mark mask mass mast meal mean meat meet melt menu mere mess mild
    mile milk mill mind mine mint miss mist mode mole mood moon more moss
    most moth move much mule must myth nail name navy near neat neck need
    nest news next nice nine node none noon norm nose note nuts oath obey
    odds once only onto open oven over pace pack page paid pain pair palm
    park part pass past path peak pear peel pick pier pile pine pink pipe
    plan play plot plug plum poem poet pole poll pond pony pool poor pork
    port pose post pour pray prey pull pump pure push quit race rack raft
    rage rail rain rank rare rate read real rear rely rent rest rice rich
    ride ring rise risk road roar robe rock role roll roof room root rope
    rose rude ruin rule rush safe sage said sail salt same sand save seal
    seat seed seek seem seen self sell send sent shed ship shoe shop shot
    show shut sick side sigh sign silk sing sink site size skin slip slow
    snap snow soap sock soft soil sold sole some song soon sort soul soup
    sour spin spot star stay stem step stir stop such suit sure swan swim
    tail take tale talk tall tame tank tape task team tear tell tend tent
    term test text than that them then they thin this tide tile time tiny
    tone tool tour town trap tray tree trim trip true tube tune turn twin
    type unit upon used user vain vary vast verb very vest view vine vote
    wage wait wake walk wall want ward warm wash wave weak wear week well
    went were west what when whip wide wife wild will wind wine wing wire
    wise wish with wolf wood wool word wore work worm wrap yard yarn year
    yell yoga zero zone""")

FIVE_LETTER_WORDS = _split("""
    about above abuse actor acute adapt admit adopt adult after again agent
    agree ahead alarm album alert alike alive allow alone along alter amber
    among angel anger angle angry ankle apart apple apply apron arena argue
    arise armor aroma arrow aside asset audio audit avoid awake award aware
    bacon badge baker basic basin batch beach beard beast begin being belly
    below bench berry birth black blade blame blank blast blaze bleak blend
    bless blind block blond blood bloom blown board boast bonus boost booth
    bound brain brake brand brass brave bread break breed brick bride brief
    bring brisk broad broke brook brown brush build built bunch burst buyer
    cabin cable camel canal candy canoe cargo carry carve catch cause cedar
    chain chair chalk charm chart chase cheap check cheek cheer chess chest
    chick chief child chill choir chord civic civil claim clash class clean
    clear clerk click cliff climb clock close cloth cloud clown coach coast
    cocoa colon color coral couch count court cover crack craft crane crash
    crate crawl crazy cream creek crest crime crisp cross crowd crown crude
    crush cubic curve cycle daily dairy daisy dance dealt death debut decay
    delay delta dense depth diary dirty ditch dizzy dodge doubt dough dozen
    draft drain drama drank drawn dream dress dried drift drill drink drive
    droop drove dwarf eager eagle early earth easel eaten eight elbow elder
    elect elite email empty enemy enjoy enter entry equal equip error essay
    event every exact exile exist extra fable faint fairy faith false fancy
    feast fence ferry fetch fever fiber field fiery fifth fifty fight final
    flame flash fleet flesh float flock flood floor flora flour fluid flute
    focus foggy force forge forth forty forum found frame fraud fresh front
    frost froze fruit fully funny gauge genre ghost giant given glass gleam
    globe glory glove grace grade grain grand grant grape graph grasp grass
    grave gravy great greed green greet grief grill grind groan groom gross
    group grove growl guard guess guest guide guild habit happy harsh haste
    hatch haunt haven heart heavy hedge hello hence honey honor horse hotel
    house hover human humid humor hurry ideal image imply index inner input
    irony issue ivory jeans jelly jewel joint judge juice jumbo kayak kebab
    knife knock known label labor laden lance large laser latch later laugh
    layer learn lease least leave ledge legal lemon level lever light limit
    linen liver llama lobby local lodge logic loose lower loyal lucky lunar
    lunch lying magic major maker mango manor maple march marsh match mayor
    medal media melon mercy merge merit merry metal meter midst might minor
    minus mirth model moist money month moral motor mound mount mouse mouth
    movie muddy music naive nerve never newly night noble noise north notch
    novel nurse nylon oasis ocean offer often olive onion opera orbit order
    organ other otter ought ounce outer owner oxide ozone paint panel panic
    paper party pasta paste patch pause peace peach pearl pedal penny perch
    phase phone photo piano piece pilot pinch pitch pixel pizza place plain
    plane plank plant plate plaza plead pluck plumb plume point polar porch
    pound power press price pride prime print prior prism prize probe prone
    proof proud prove prune pulse punch pupil purse quack quail quake quart
    queen query quest quick quiet quilt quota quote radar radio rainy raise
    rally ranch range rapid raven reach react ready realm rebel refer reign
    relax relay remix renew reply rider ridge rifle right rigid rinse ripen
    risen risky rival river roast robin robot rocky rogue roost rough round
    route royal rugby ruler rumor rural rusty sadly saint salad salon sandy
    sauce scale scarf scene scent scone scoop scope score scout scrap scrub
    sense serve setup seven shade shake shall shape share shark sharp sheep
    sheet shelf shell shift shine shirt shock shore short shout shown shrug
    siege sight silly since siren sixth sixty skate skill skirt skull slate
    sleep slice slide slope small smart smell smile smoke snack snake sneak
    solar solid solve sorry sound south space spare spark speak spear speed
    spell spend spice spike spine spoon sport spray squad stack staff stage
    stain stair stake stale stamp stand stare start state steak steam steel
    steep steer stern stick stiff still sting stock stone stood stool store
    storm story stove strap straw strip stuck study stuff style sugar suite
    sunny super surge swamp swarm swear sweat sweep sweet swift swing sword
    syrup table taken tally tango taste teach tease teeth tempo tenth thank
    theme there thick thief thing think third thorn those three threw throw
    thumb tiger tight timer tired title toast today token tonic tooth topic
    torch total touch tough tower toxic trace track trade trail train trait
    tramp trash tread treat trend trial tribe trick tried troop trout truck
    truly trunk trust truth tulip tumor tuner twice twist ultra uncle under
    union unite unity until upper upset urban usage usual utter vague valid
    value valve vapor vault venue verse video vigor vinyl viola viral virus
    visit vista vital vivid vocal voice voter wagon waist waste watch water
    weary weave wedge weigh weird whale wheat wheel where which while whirl
    white whole whose widen widow width wield windy witty woman world worry
    worse worst worth would wound woven wrath wreck wrist write wrong yacht
    yearn yeast yield young youth zebra""")

SIX_LETTER_WORDS = _split("""
    absent accept access across action active actual advice advise affect
    afford afraid agency agenda almost always amount animal annual answer
    anyone anyway appeal appear around arrive artist aspect assert assess
    assist assume attach attack attend august author autumn avenue backup
    ballet banana banner barely barrel basket battle beauty become before
    behalf behave behind belief belong better beyond bishop bitter blonde
    bloody bodily border borrow bottle bottom bounce bought branch breath
    breeze bridge bright broken broker bronze bubble bucket budget buffer
    bundle burden bureau butter button camera campus cancel candle canvas
    carbon career carpet carrot casino castle casual cattle caught celery
    cement center cereal chance change chapel charge cheese cherry choice
    choose chorus church circle circus clause client climax closet clumsy
    coffee collar colony column combat comedy coming commit common cookie
    copper corner cotton county couple course cousin create credit crisis
    critic cruise custom damage dancer danger debate decade decent decide
    defeat defend define degree demand denial depend deputy desert design
    desire detail detect device devote dialog differ dinner direct divide
    doctor dollar domain donkey double dragon drawer driver during easily
    eating editor effect effort eighth either eleven emerge empire employ
    enable ending energy engage engine enough ensure entire entity equity
    escape estate ethnic evolve exceed except excuse expand expect expert
    export expose extend extent fabric facing factor fairly fallen family
    famous farmer father fellow female figure filter finger finish fiscal
    flavor flight flower flying follow forest forget formal format former
    foster fourth freeze friend frozen future galaxy garage garden garlic
    gather gender gentle gifted ginger glance global golden govern growth
    guitar hammer handle happen harbor hardly health heaven height helmet
    hidden highly hiking honest hunger hunter ignore impact import income
    indeed infant inform injury insect inside insist intend invest island
    itself jacket jersey jungle junior kernel kettle kidney kitten ladder
    latest latter launch lawyer leader league lesson letter likely liquid
    listen little lively living locate lonely lovely luxury maiden mainly
    manage manner marble margin marine market master matter meadow medium
    member memory mental merely method middle mighty minute mirror mobile
    modern modest moment monkey mostly mother motion murder muscle museum
    mutual myself narrow nation native nature nearby nearly needle nephew
    nickel nobody normal notice number object obtain office online oppose
    option orange origin output oxygen packet palace parade parent parrot
    partly pastry patrol pencil people pepper period permit person phrase
    pickle picnic pigeon planet player please plenty pocket poetry police
    policy polish potato powder praise prayer prefer pretty prince prison
    profit proper proven public puppet purple pursue puzzle rabbit random
    rarely rather rating reader really reason recall recent recipe record
    reduce reform refuse regard region relate relief remain remote remove
    render repair repeat report rescue resort result retail retain return
    reveal review reward rhythm ribbon riddle ripple rocket rubber safety
    salmon sample saving scheme school screen script search season second
    secret sector secure select seller senior series settle severe shadow
    shield shiver shower signal silent silver simple singer single sister
    sketch slight smooth soccer social sodium soften source speech spider
    spirit splash spread spring square stable statue steady stereo sticky
    stolen strain stream street stress strict strike string stripe stroke
    strong studio submit sudden suffer summer summit supply surely survey
    switch symbol system tablet tackle talent target temple tenant tender
    tennis thirty thread threat throne ticket timber tomato tongue toward
    travel treaty tribal trophy tunnel turkey turtle twelve twenty unable
    unique unless update useful valley velvet vendor victim violin virtue
    vision visual volume voyage waiter wallet walnut wander warmth wealth
    weapon weekly weight widely window winner winter wisdom wizard wonder
    wooden worker writer yellow zipper""")

WORDS_BY_LENGTH: Dict[int, Tuple[str, ...]] = {
    4: FOUR_LETTER_WORDS,
    5: FIVE_LETTER_WORDS,
    6: SIX_LETTER_WORDS,
}

# Key words and cascade words are both drawn from the five-letter list
CASCADE_WORDS = FIVE_LETTER_WORDS


def all_words() -> Tuple[str, ...]:
    """Every built-in word, all lengths combined."""
    return FOUR_LETTER_WORDS + FIVE_LETTER_WORDS + SIX_LETTER_WORDS


def words_of_length(length: int) -> Tuple[str, ...]:
    """Words of one length (empty for lengths without a list)."""
    return WORDS_BY_LENGTH.get(length, ())
