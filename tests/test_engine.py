"""
Testes do motor de extração do nome do pagador (PayerNameEngine).

Testa:
    - Ordem de precedência das etapas
    - Checagem final de frases proibidas
    - Dados de referência e etapas injetados
    - Robustez: entrada vazia/None e falhas internas viram ""
"""

import unittest
from unittest.mock import MagicMock

from core.engine import (
    PayerNameEngine,
    default_reference_data,
    default_stages,
    extract_payer_name,
)
from core.extractors import BaseStage
from core.models import Candidate, ReferenceData, SourceStage


def _texto(*rows):
    return "\n".join(rows)


class TestExtractPayerName(unittest.TestCase):
    """Comportamento da função pública com os dados padrão."""

    def test_entrada_vazia(self):
        self.assertEqual(extract_payer_name(""), "")
        self.assertEqual(extract_payer_name(None), "")
        self.assertEqual(extract_payer_name("   \n \n"), "")

    def test_entrada_nao_texto(self):
        self.assertEqual(extract_payer_name(12345), "")

    def test_pago_por(self):
        texto = _texto("RECIBO", "PAGO POR", "NOME", "JOAO DA SILVA", "CPF: 123.456.789-00")
        self.assertEqual(extract_payer_name(texto), "JOAO DA SILVA")

    def test_origem_com_dois_pontos(self):
        texto = _texto("ORIGEM", "NOME:", "MARIA OLIVEIRA")
        self.assertEqual(extract_payer_name(texto), "MARIA OLIVEIRA")

    def test_pula_banco_depois_do_marcador(self):
        texto = _texto("PAGO POR", "NOME", "BANCO INTER", "CARLOS PEREIRA")
        self.assertEqual(extract_payer_name(texto), "CARLOS PEREIRA")

    def test_nome_mascarado_preservado(self):
        texto = _texto("Pago por", "Nome", "J*** S**** DA SILVA")
        self.assertEqual(extract_payer_name(texto), "J*** S**** DA SILVA")

    def test_quebras_de_linha_windows(self):
        texto = "PAGO POR\r\nNOME\r\nJOAO DA SILVA\r\n"
        self.assertEqual(extract_payer_name(texto), "JOAO DA SILVA")

    def test_similaridade_prefere_nome_conhecido(self):
        texto = _texto("XYZW QWERTY KLMNOP", "JULIA SOUZA")
        self.assertEqual(extract_payer_name(texto), "JULIA SOUZA")

    def test_frase_proibida(self):
        texto = "Estamos aqui para ajudar se você tiver alguma"
        self.assertEqual(extract_payer_name(texto), "")

    def test_idempotente(self):
        texto = _texto("ORIGEM", "NOME", "MARIA OLIVEIRA", "PAGO POR", "NOME", "ANA LIMA")
        primeira = extract_payer_name(texto)
        self.assertEqual(primeira, "ANA LIMA")
        self.assertEqual(extract_payer_name(texto), primeira)

    def test_comprovante_completo(self):
        """Caso típico: bloco de origem e destino no mesmo comprovante."""
        texto = _texto(
            "Comprovante de transferência",
            "Pix enviado",
            "R$ 150,00",
            "Quinta-feira, 12/05/2024 às 14:32",
            "Origem",
            "Nome",
            "MARIA OLIVEIRA SANTOS",
            "CPF ***.456.789-**",
            "Instituição",
            "BANCO INTER S.A.",
            "Destino",
            "Nome",
            "TCR FINANCE LTDA",
        )
        self.assertEqual(extract_payer_name(texto), "MARIA OLIVEIRA SANTOS")


class TestPayerNameEngine(unittest.TestCase):
    """Motor com dados de referência e etapas injetados."""

    def test_pago_por_tem_precedencia_sobre_origem(self):
        engine = PayerNameEngine()
        result = engine.extract(
            _texto("ORIGEM", "NOME", "MARIA OLIVEIRA", "PAGO POR", "NOME", "ANA LIMA")
        )
        self.assertEqual(result.name, "ANA LIMA")
        self.assertEqual(result.candidate.source_stage, SourceStage.ANCHORED_PAGOPOR)
        self.assertTrue(result.found)

    def test_resultado_vazio(self):
        result = PayerNameEngine().extract("")
        self.assertEqual(result.name, "")
        self.assertIsNone(result.candidate)
        self.assertFalse(result.found)

    def test_referencia_injetada(self):
        """Palavra-chave que não existe na lista padrão."""
        reference = ReferenceData.build(payer_anchors=["cliente"])
        engine = PayerNameEngine(reference=reference)

        result = engine.extract(_texto("Cliente", "Roberto Alves"))

        self.assertEqual(result.name, "Roberto Alves")
        self.assertEqual(result.candidate.source_stage, SourceStage.KEYWORD_GENERIC)

    def test_frase_proibida_injetada(self):
        """A checagem final vale para qualquer etapa."""
        reference = ReferenceData.build(payer_anchors=["cliente"], banned_phrases=["Roberto Alves"])
        engine = PayerNameEngine(reference=reference)
        self.assertEqual(engine.extract_name(_texto("Cliente", "Roberto Alves")), "")

    def test_corpus_vazio_fica_com_linha_mais_longa(self):
        engine = PayerNameEngine(reference=ReferenceData.build())
        result = engine.extract(_texto("ANA LIMA", "ROBERTO CARLOS PEREIRA"))
        self.assertEqual(result.name, "ROBERTO CARLOS PEREIRA")
        self.assertEqual(result.candidate.source_stage, SourceStage.FUZZY)

    def test_ultimo_recurso(self):
        engine = PayerNameEngine(reference=ReferenceData.build())
        result = engine.extract(_texto("R$ 10,00", "Ana Lima", "Roberto Carlos Souza"))
        self.assertEqual(result.name, "Roberto Carlos Souza")
        self.assertEqual(result.candidate.source_stage, SourceStage.LAST_RESORT)

    def test_curto_circuito(self):
        """Etapas seguintes não rodam depois de um candidato."""
        first = MagicMock(spec=BaseStage)
        first.extract.return_value = Candidate(text="ANA LIMA", source_stage=SourceStage.FUZZY)
        second = MagicMock(spec=BaseStage)

        engine = PayerNameEngine(reference=ReferenceData.build(), stages=[first, second])

        self.assertEqual(engine.extract_name("qualquer texto"), "ANA LIMA")
        second.extract.assert_not_called()

    def test_falha_interna_vira_vazio(self):
        broken = MagicMock(spec=BaseStage)
        broken.extract.side_effect = RuntimeError("falha inesperada")

        engine = PayerNameEngine(reference=ReferenceData.build(), stages=[broken])

        with self.assertLogs("core.engine", level="ERROR"):
            self.assertEqual(engine.extract_name("PAGO POR\nNOME\nANA LIMA"), "")

    def test_etapas_padrao_em_ordem(self):
        stages = [stage.stage for stage in default_stages()]
        self.assertEqual(
            stages,
            [
                SourceStage.ANCHORED_PAGOPOR,
                SourceStage.ANCHORED_ORIGEM,
                SourceStage.KEYWORD_GENERIC,
                SourceStage.FUZZY,
                SourceStage.LAST_RESORT,
            ],
        )


class TestReferenceData(unittest.TestCase):
    """Normalização das listas de referência."""

    def test_build_normaliza(self):
        reference = ReferenceData.build(
            payer_anchors=["  Pagador ", "PAGADOR", "", "origem"],
        )
        self.assertEqual(reference.payer_anchors, ("pagador", "origem"))

    def test_dados_padrao(self):
        reference = default_reference_data()
        self.assertIn("pago por", reference.payer_anchors)
        self.assertIn("banco inter", reference.ignore_phrases)
        self.assertIn("julia", reference.name_tokens)
        self.assertIn(
            "estamos aqui para ajudar se você tiver alguma", reference.banned_phrases
        )
        self.assertEqual(len(reference.name_tokens), len(set(reference.name_tokens)))

    def test_imutavel(self):
        reference = ReferenceData.build(payer_anchors=["pagador"])
        with self.assertRaises(Exception):
            reference.payer_anchors = ("outro",)


if __name__ == "__main__":
    unittest.main()
