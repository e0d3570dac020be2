"""
Dados de referência para a extração do nome do pagador.

Três listas estáticas, carregadas uma única vez e somente leitura:

- PAYER_KEYWORDS: rótulos que antecedem o bloco do pagador
  (ordenados por prioridade: alta, média, baixa).
- IGNORE_KEYWORDS: termos que desqualificam uma linha como nome
  (bancos, rótulos de documento, textos institucionais).
- COMMON_NAMES: nomes e sobrenomes comuns no Brasil, usados apenas
  pelo fallback por distância de Levenshtein.

Duplicatas e maiúsculas são tratadas em ReferenceData.build().
"""

# Palavras-chave de alta prioridade
HIGH_PRIORITY_KEYWORDS = (
    'dados de quem pagou', 'quem pagou', 'pagador', 'origem',
    'nome do pagador', 'nome do remetente', 'realizado por',
    'transferência feita por', 'pagamento feito por', 'dados do pagador',
)

MEDIUM_PRIORITY_KEYWORDS = (
    'pago por', 'ordenante', 'remetente', 'titular da conta',
    'emissor', 'originado por', 'transferido por',
    'payer', 'nome', 'nome completo', 'responsável', 'pagante',
)

# Maior risco de falsos positivos (Mercado Pago usa "e De")
LOW_PRIORITY_KEYWORDS = (
    'de', 'e de', 'sua compra',
)

PAYER_KEYWORDS = HIGH_PRIORITY_KEYWORDS + MEDIUM_PRIORITY_KEYWORDS + LOW_PRIORITY_KEYWORDS

IGNORE_KEYWORDS = (
    'comprovante', 'recibo', 'recibido', 'recibimento', 'pagamento', 'transação',
    'transacao', 'pix', 'banco', 'instituição', 'instituicao', 'autenticação',
    'autenticacao', 'recebido por', 'quem recebeu', 'recebedor', 'favorecido',
    'beneficiário', 'cnpj', 'cpf', 'id pix', 'id da transação', 'identificador',
    'conta pagamento', 'sobre a transação', 'valor', 'data do pagamento', 'horário',
    'dados do pagamento', 'efí', 'banco inter', 'fitbank', 'cora', 'plebankcombr',
    'fraguismo', 'quem pagou', 'tcr finance', 'tcr', 'finance',
    # Textos institucionais
    'estamos aqui para ajudar', 'me ajuda', 'ouvidoria', 'atendimento',
    'informações adicionais', 'estamos aqui para ajudar se você tiver alguma',
    'informações', 'informacoes', 'adicionais',
    # Mercado Pago
    'mercado pago', 'mercadopago', 'comprovante de pagamento', 'o comprovante de pagamento',
    'o&', 'id da transação pix', 'código de autenticação', 'atendimento ao cliente',
    'sua compra', 'total', 'para', 'psp',
    # Dias da semana e horário
    'quinta-feira', 'segunda-feira', 'terça-feira', 'quarta-feira',
    'sexta-feira', 'sábado', 'domingo', 'às',
    # Cabeçalhos de comprovantes
    'dados do pagador', 'dados do recebedor', 'identificação', 'identificacao',
    'instívição', 'dados do', 'dados da',
)

# Frase de rodapé que o OCR insiste em devolver como "nome"
BANNED_PHRASES = (
    'estamos aqui para ajudar se você tiver alguma',
)

COMMON_NAMES = (
    # Nomes masculinos
    'lucas', 'joão', 'gabriel', 'miguel', 'pedro', 'matheus', 'rafael', 'gustavo', 'henrique',
    'eduardo', 'arthur', 'bernardo', 'vinicius', 'felipe', 'caio', 'thiago', 'henry', 'enrico',
    'enzo', 'daniel', 'marcos', 'marcelo', 'rodrigo', 'renan', 'andre', 'bruno', 'igor',
    'diego', 'leonardo', 'nicolas', 'ricardo', 'william', 'alexandre', 'carlos', 'antonio',
    'luiz', 'vitor', 'paulo', 'jorge', 'emerson', 'claudio', 'edson', 'samuel',
    'davi', 'henri', 'jean', 'caue', 'roberto', 'allan', 'ronaldo', 'gilberto', 'julio',
    'cesar', 'renato', 'wilson', 'edgar', 'fabricio', 'valter', 'diogo', 'tiago',
    'ismael', 'alex', 'ronan', 'fabio', 'edilson', 'anderson', 'gerson', 'edu',
    'luan', 'alberto', 'sergio', 'emanuel', 'mateus', 'otavio', 'pablo', 'vicente',
    'hugo', 'leandro', 'josé', 'felix', 'robson', 'evandro', 'isaac', 'joaquim',

    # Nomes femininos
    'maria', 'ana', 'julia', 'mariana', 'isabela', 'camila', 'leticia', 'larissa', 'beatriz',
    'aline', 'bruna', 'carla', 'fernanda', 'patricia', 'juliana', 'caroline', 'bianca',
    'valeria', 'nathalia', 'natalia', 'priscila', 'yara', 'lara', 'tatiane', 'tatiana',
    'dayane', 'elaine', 'eliane', 'simone', 'carol', 'luana', 'amanda', 'andressa',
    'cristina', 'raquel', 'adriana', 'gabriela', 'tania', 'marcela', 'manuela',
    'lais', 'rayssa', 'deborah', 'renata', 'monique', 'isabel', 'heloisa', 'sofia',
    'laura', 'clara', 'ester', 'elisa', 'sabrina', 'alice', 'valentina', 'letícia',
    'flavia', 'viviane', 'rosana', 'patrícia', 'edna', 'angela', 'tais',

    # Sobrenomes mais comuns
    'silva', 'santos', 'oliveira', 'souza', 'sousa', 'pereira', 'lima', 'costa',
    'rodrigues', 'almeida', 'nascimento', 'araujo', 'fernandes', 'carvalho', 'gomes',
    'martins', 'ribeiro', 'barbosa', 'barros', 'freitas', 'batista', 'dias', 'teixeira',
    'moura', 'mendes', 'melo', 'castro', 'alves', 'cardoso', 'marques', 'vieira',
    'ferreira', 'machado', 'rocha', 'reis', 'dantas', 'viana', 'farias', 'ramos',
    'cavalcante', 'pinto', 'soares', 'morais', 'moreira', 'monteiro', 'macedo',
    'souza e silva', 'sousa e silva', 'de souza', 'de oliveira', 'da silva', 'dos santos',
    'de almeida', 'do nascimento', 'de araujo', 'de lima', 'de barros', 'da costa',
    'da rocha', 'da cruz', 'de castro', 'de andrade', 'de moraes', 'da conceição',

    # Sobrenomes regionais / menos comuns
    'cunha', 'azevedo', 'fonseca', 'vargas', 'fagundes', 'ramalho',
    'diniz', 'neves', 'valente', 'guimarães', 'maciel', 'damasceno', 'nogueira',
    'vilela', 'xavier', 'meireles', 'viegas', 'cavalcanti', 'coelho',
    'figueira', 'motta', 'parente', 'pimentel', 'castilho', 'caputo', 'goulart',
    'bittencourt', 'brito', 'franco', 'serra', 'capixaba', 'mota', 'lopez', 'guerra',
    'amaral', 'romero', 'braga', 'barreto', 'ponte', 'falcão', 'assunção',
    'passos', 'salazar', 'valadares', 'menezes', 'peixoto', 'prado', 'coimbra',
    'campos', 'parreira', 'junior', 'filho', 'neto', 'sobrinho', 'junqueira',
    'figueiredo', 'meneses', 'queiroz', 'faustino', 'tavares', 'porto',
    'meira', 'gama', 'hoed', 'serafim', 'roza', 'rosa', 'oliveira lima', 'costa filho',
    'pontes', 'barcelos', 'moreno', 'gomes da silva',
    'nunes', 'santana', 'barroso', 'vilar', 'gondim',

    # Compostos e prefixados
    'da mata', 'do vale', 'das neves', 'do carmo', 'de jesus',
    'dos anjos', 'da gloria', 'de azevedo', 'da luz',
    'do rosario', 'de faria', 'de brito', 'de castilho', 'da fonseca', 'de freitas',
    'do couto', 'de souza filho', 'de oliveira filho',

    # Internacionalizados (comuns no BR)
    'andrew', 'brandon', 'brian', 'cristian', 'jonathan', 'kevin',
    'willian', 'patrick', 'robin', 'wesley', 'danilo', 'emily', 'stephanie',
    'nicole', 'vanessa', 'jessica', 'karen', 'tamiris',
    'rebeca', 'taylor', 'victor', 'heitor',

    # Raros mas recorrentes em KYC / documentos
    'dos reis', 'de hollanda', 'de queiroz', 'de moura',
    'do amaral', 'de araújo', 'de bastos',
)
