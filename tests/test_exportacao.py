"""
Testes da exportacao CSV.

Execute com: pytest tests/test_exportacao.py -v
"""

import csv
import io
from datetime import date

from src.cancelamentos import Motivo, Status
from src.exportacao import CABECALHO, exportar_csv, nome_arquivo_exportacao


def _ler_csv(texto):
    return list(csv.reader(io.StringIO(texto)))


class TestExportacaoCSV:
    """Cabecalho + uma linha por solicitacao, na ordem dos campos."""

    def test_registro_unico_duas_linhas(self, nova_solicitacao):
        texto = exportar_csv([nova_solicitacao(id=1, seape="X", empresa="Y", motivo=Motivo.OUTROS)])

        linhas = texto.split("\n")
        assert len(linhas) == 2
        assert linhas[0] == "ID,SEAPE,Empresa,Motivo,Status,Data de Criação"
        assert linhas[1] == "1,X,Y,OUTROS,REQUESTED,10/03/2024"

    def test_colecao_vazia_apenas_cabecalho(self):
        assert exportar_csv([]) == ",".join(CABECALHO)

    def test_sem_quebra_de_linha_final(self, nova_solicitacao):
        assert not exportar_csv([nova_solicitacao()]).endswith("\n")

    def test_ordem_da_colecao(self, nova_solicitacao):
        texto = exportar_csv([
            nova_solicitacao(id=2, empresa="Nova", status=Status.CANCELLED),
            nova_solicitacao(id=1, empresa="Antiga", status=Status.REVERSED),
        ])
        linhas = _ler_csv(texto)
        assert [linha[0] for linha in linhas[1:]] == ["2", "1"]
        assert [linha[4] for linha in linhas[1:]] == ["CANCELLED", "REVERSED"]

    def test_virgula_e_aspas_sao_escapadas(self, nova_solicitacao):
        """Nome de empresa com virgula e aspas nao quebra as colunas."""
        empresa = 'Acme, "Filial" Sul'
        texto = exportar_csv([nova_solicitacao(empresa=empresa, seape="SP;01")])

        linhas = _ler_csv(texto)
        assert len(linhas) == 2
        assert len(linhas[1]) == len(CABECALHO)
        assert linhas[1][2] == empresa
        assert '"Acme, ""Filial"" Sul"' in texto

    def test_quebra_de_linha_no_campo(self, nova_solicitacao):
        texto = exportar_csv([nova_solicitacao(empresa="Linha 1\nLinha 2")])
        linhas = _ler_csv(texto)
        assert len(linhas) == 2
        assert linhas[1][2] == "Linha 1\nLinha 2"

    def test_data_no_fuso_configurado(self, nova_solicitacao):
        solicitacao = nova_solicitacao(criado_em="2024-03-11T01:00:00+00:00")
        assert exportar_csv([solicitacao], "America/Sao_Paulo").endswith("10/03/2024")
        assert exportar_csv([solicitacao], "UTC").endswith("11/03/2024")


class TestNomeArquivo:

    def test_nome_com_data_iso(self):
        assert nome_arquivo_exportacao(date(2024, 3, 5)) == "cancelamentos_2024-03-05.csv"

    def test_padrao_usa_hoje(self):
        assert nome_arquivo_exportacao() == f"cancelamentos_{date.today().isoformat()}.csv"
