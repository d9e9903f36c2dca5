from pdflinks import run

run()
