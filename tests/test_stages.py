"""
Testes das etapas do pipeline de extração do pagador.

Cada etapa recebe linhas normalizadas e dados de referência pequenos,
injetados no teste, para que o resultado não dependa das listas padrão.
"""

import unittest

from core.models import ReferenceData, SourceStage
from core.normalizer import normalize_lines
from extractors.anchored import AnchoredExtractor
from extractors.fuzzy import FuzzyReferenceExtractor, closest_name_distance
from extractors.keyword import GenericKeywordExtractor
from extractors.last_resort import LastResortExtractor


def _lines(*rows):
    return normalize_lines("\n".join(rows))


class TestNormalizeLines(unittest.TestCase):
    """Quebra do texto OCR em linhas."""

    def test_trim_e_descarte_de_vazias(self):
        lines = normalize_lines("  PAGO POR \n\n   \n NOME ")
        self.assertEqual([l.normalized for l in lines], ["PAGO POR", "NOME"])
        self.assertEqual([l.index for l in lines], [0, 1])

    def test_quebras_de_linha_mistas(self):
        lines = normalize_lines("A\r\nB\rC\nD")
        self.assertEqual([l.normalized for l in lines], ["A", "B", "C", "D"])

    def test_espelho_minusculo(self):
        line = normalize_lines("Pago Por")[0]
        self.assertEqual(line.lower, "pago por")

    def test_entrada_invalida(self):
        self.assertEqual(normalize_lines(None), [])
        self.assertEqual(normalize_lines(""), [])
        self.assertEqual(normalize_lines(123), [])


class TestAnchoredExtractor(unittest.TestCase):
    """Âncora → "nome" → nome."""

    def setUp(self):
        self.reference = ReferenceData.build(ignore_phrases=["banco", "instituição"])
        self.pago_por = AnchoredExtractor("pago por", SourceStage.ANCHORED_PAGOPOR)
        self.origem = AnchoredExtractor("origem", SourceStage.ANCHORED_ORIGEM)

    def test_caso_basico(self):
        lines = _lines("RECIBO", "PAGO POR", "NOME", "JOAO DA SILVA", "CPF: 123.456.789-00")
        candidate = self.pago_por.extract(lines, self.reference)

        self.assertEqual(candidate.text, "JOAO DA SILVA")
        self.assertEqual(candidate.source_stage, SourceStage.ANCHORED_PAGOPOR)
        self.assertEqual(candidate.line_index, 3)
        self.assertIsNone(candidate.distance)

    def test_marcador_com_dois_pontos(self):
        lines = _lines("ORIGEM", "NOME:", "MARIA OLIVEIRA")
        self.assertEqual(self.origem.extract(lines, self.reference).text, "MARIA OLIVEIRA")

    def test_ancora_case_insensitive(self):
        lines = _lines("Pago por", "Nome", "Ana Lima")
        self.assertEqual(self.pago_por.extract(lines, self.reference).text, "Ana Lima")

    def test_ancora_precisa_ser_a_linha_inteira(self):
        lines = _lines("DADOS PAGO POR", "NOME", "JOAO DA SILVA")
        self.assertIsNone(self.pago_por.extract(lines, self.reference))

    def test_marcador_na_segunda_linha(self):
        lines = _lines("PAGO POR", "CONTA CORRENTE", "NOME", "JOAO DA SILVA")
        self.assertEqual(self.pago_por.extract(lines, self.reference).text, "JOAO DA SILVA")

    def test_marcador_fora_do_alcance(self):
        lines = _lines("PAGO POR", "CONTA", "AGENCIA", "NOME", "JOAO DA SILVA")
        self.assertIsNone(self.pago_por.extract(lines, self.reference))

    def test_pula_linhas_invalidas_depois_do_marcador(self):
        lines = _lines("PAGO POR", "NOME", "BANCO INTER", "123.456.789-00", "CARLOS PEREIRA")
        self.assertEqual(self.pago_por.extract(lines, self.reference).text, "CARLOS PEREIRA")

    def test_segunda_ocorrencia_da_ancora(self):
        """Âncora sem marcador não encerra a busca."""
        lines = _lines("PAGO POR", "R$ 10,00", "PAGO POR", "NOME", "ANA LIMA")
        candidate = self.pago_por.extract(lines, self.reference)
        self.assertEqual(candidate.text, "ANA LIMA")
        self.assertEqual(candidate.line_index, 4)

    def test_sem_ancora(self):
        lines = _lines("NOME", "JOAO DA SILVA")
        self.assertIsNone(self.pago_por.extract(lines, self.reference))

    def test_marcador_sem_nome_valido(self):
        lines = _lines("ORIGEM", "NOME", "R$ 150,00", "12/05/2024")
        self.assertIsNone(self.origem.extract(lines, self.reference))


class TestGenericKeywordExtractor(unittest.TestCase):
    """Palavra-chave do pagador + 1 ou 2 linhas seguintes."""

    def setUp(self):
        self.reference = ReferenceData.build(
            payer_anchors=["pagador", "remetente"],
            ignore_phrases=["banco"],
        )
        self.stage = GenericKeywordExtractor()

    def test_linha_seguinte(self):
        lines = _lines("PAGADOR", "JOAO DA SILVA")
        candidate = self.stage.extract(lines, self.reference)
        self.assertEqual(candidate.text, "JOAO DA SILVA")
        self.assertEqual(candidate.source_stage, SourceStage.KEYWORD_GENERIC)

    def test_palavra_chave_como_substring(self):
        lines = _lines("Dados do pagador", "123456", "CARLOS PEREIRA")
        self.assertEqual(self.stage.extract(lines, self.reference).text, "CARLOS PEREIRA")

    def test_nome_alem_de_duas_linhas(self):
        lines = _lines("PAGADOR", "R$ 10,00", "11/11/2024", "JOAO SOUZA")
        self.assertIsNone(self.stage.extract(lines, self.reference))

    def test_continua_na_proxima_palavra_chave(self):
        lines = _lines("PAGADOR", "R$ 10,00", "11/11/2024", "REMETENTE", "JOAO SOUZA")
        candidate = self.stage.extract(lines, self.reference)
        self.assertEqual(candidate.text, "JOAO SOUZA")
        self.assertEqual(candidate.line_index, 4)

    def test_remove_rotulo_nome(self):
        lines = _lines("Remetente", "NOME MARIA OLIVEIRA")
        self.assertEqual(self.stage.extract(lines, self.reference).text, "MARIA OLIVEIRA")

    def test_sem_palavra_chave(self):
        lines = _lines("JOAO DA SILVA", "MARIA OLIVEIRA")
        self.assertIsNone(self.stage.extract(lines, self.reference))


class TestClosestNameDistance(unittest.TestCase):
    """Distância de Levenshtein contra o corpus de nomes."""

    def test_igual(self):
        self.assertEqual(closest_name_distance("JULIA SOUZA", ("julia", "souza")), 0)

    def test_uma_troca(self):
        self.assertEqual(closest_name_distance("JULYA", ("julia",)), 1)

    def test_menor_entre_as_palavras(self):
        self.assertEqual(closest_name_distance("XPTO SOUZZA", ("souza",)), 1)

    def test_corpus_vazio(self):
        self.assertIsNone(closest_name_distance("JULIA", ()))

    def test_texto_sem_palavras(self):
        self.assertIsNone(closest_name_distance("", ("julia",)))


class TestFuzzyReferenceExtractor(unittest.TestCase):
    """Fallback por similaridade."""

    def setUp(self):
        self.reference = ReferenceData.build(
            ignore_phrases=["banco"],
            name_tokens=["julia", "souza"],
            banned_phrases=["estamos aqui para ajudar"],
        )
        self.stage = FuzzyReferenceExtractor(max_distance=2)

    def test_prefere_nome_conhecido_a_linha_mais_longa(self):
        lines = _lines("XYZW QWERTY KLMNOP", "JULIA SOUZA")
        candidate = self.stage.extract(lines, self.reference)

        self.assertEqual(candidate.text, "JULIA SOUZA")
        self.assertEqual(candidate.source_stage, SourceStage.FUZZY)
        self.assertEqual(candidate.distance, 0)
        self.assertEqual(candidate.line_index, 1)

    def test_aceita_erro_de_ocr(self):
        lines = _lines("XYZW QWERTY KLMNOP", "JULYA SOUZZA")
        candidate = self.stage.extract(lines, self.reference)
        self.assertEqual(candidate.text, "JULYA SOUZZA")
        self.assertEqual(candidate.distance, 1)

    def test_sem_vizinho_proximo_fica_com_linha_mais_longa(self):
        lines = _lines("QQQQQ", "XYZW QWERTY KLMNOP")
        candidate = self.stage.extract(lines, self.reference)
        self.assertEqual(candidate.text, "XYZW QWERTY KLMNOP")
        self.assertIsNone(candidate.distance)

    def test_corpus_vazio_fica_com_linha_mais_longa(self):
        reference = ReferenceData.build(name_tokens=[])
        lines = _lines("JULIA SOUZA", "ROBERTO CARLOS PEREIRA")
        candidate = self.stage.extract(lines, reference)
        self.assertEqual(candidate.text, "ROBERTO CARLOS PEREIRA")

    def test_empate_fica_com_a_primeira(self):
        lines = _lines("JULIA ALVES", "SOUZA BRAGA")
        self.assertEqual(self.stage.extract(lines, self.reference).text, "JULIA ALVES")

    def test_ignora_minusculas_e_ruido(self):
        lines = _lines("Julia Souza", "BANCO JULIA", "CPF JULIA SOUZA")
        self.assertIsNone(self.stage.extract(lines, self.reference))

    def test_remove_rotulo_nome(self):
        lines = _lines("NOME JULIA SOUZA")
        self.assertEqual(self.stage.extract(lines, self.reference).text, "JULIA SOUZA")

    def test_frase_proibida_nao_entra(self):
        lines = _lines("ESTAMOS AQUI PARA AJUDAR")
        self.assertIsNone(self.stage.extract(lines, self.reference))


class TestLastResortExtractor(unittest.TestCase):
    """Linha só de letras com mais letras."""

    def setUp(self):
        self.reference = ReferenceData.build()
        self.stage = LastResortExtractor()

    def test_mais_letras(self):
        lines = _lines("R$ 10,00", "Ana Lima", "Roberto Carlos Souza")
        candidate = self.stage.extract(lines, self.reference)
        self.assertEqual(candidate.text, "Roberto Carlos Souza")
        self.assertEqual(candidate.source_stage, SourceStage.LAST_RESORT)

    def test_empate_fica_com_a_primeira(self):
        lines = _lines("Ana Lima", "Bia Reis")
        self.assertEqual(self.stage.extract(lines, self.reference).text, "Ana Lima")

    def test_asteriscos_nao_contam(self):
        lines = _lines("J*** S**** DA SILVA", "Maria Oliveira")
        self.assertEqual(self.stage.extract(lines, self.reference).text, "Maria Oliveira")

    def test_sem_linha_elegivel(self):
        lines = _lines("123", "R$ 5,00", "AB")
        self.assertIsNone(self.stage.extract(lines, self.reference))


if __name__ == "__main__":
    unittest.main()
